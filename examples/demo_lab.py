"""
vigenere_lab - Live Demo: Main, Lab and Research Surfaces
==========================================================
Run:  python examples/demo_lab.py [output.png]

Walks through a full encrypt/decrypt with its trace, the Caesar and
one-time-pad experiments, key recovery from a known pair, and writes the
tabula recta as a PNG. Uses an in-memory store, so the persisted
indexing mode is left untouched.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_lab.indexing import IndexingModeState
from vigenere_lab.storage  import MemoryStore
from vigenere_lab.tabula   import render_tabula_png
from vigenere_lab.tabs     import (
    caesar_experiment,
    generate_random_key,
    one_time_pad_experiment,
    process_text,
    research_reverse_tabula,
    research_tabula,
)

LINE = "═" * 70
MSG  = "Attack at dawn, hold the ridge."
KEY  = "LEMON"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=" %(message)s")
state = IndexingModeState(MemoryStore())
state.subscribe(lambda offset: ok("Mode changed", "A=1" if offset else "A=0"))

# ─────────────────────────────────────────────────────────────────────────────
for offset in (0, 1):
    state.set_offset(offset)
    header(f"MAIN - encrypt / decrypt  [{state.label()}]")
    enc = process_text(MSG, KEY, "encrypt", state)
    dec = process_text(enc.output, KEY, "decrypt", state)
    ok("Input", MSG)
    if enc.validation.message:
        ok("Note", enc.validation.message)
    for label, letters in enc.rows:
        ok(f"{label:<6}", " ".join(letters))
    ok("Decrypted", dec.output)

# ─────────────────────────────────────────────────────────────────────────────
state.set_offset(0)
header("LAB - single-letter key (Caesar)")
exp = caesar_experiment("Veni vidi vici", "D", state)
ok("Plaintext", exp.sanitized_text)
ok("Key", exp.repeated_key)
ok("Ciphertext", exp.ciphertext)
ok("Uniform shift", f"{exp.shift} [{exp.mode_label}]")

header("LAB - one-time pad")
pad = generate_random_key(len(exp.sanitized_text))
otp = one_time_pad_experiment("Veni vidi vici", pad, state)
for label, letters in otp.rows:
    ok(f"{label:<6}", " ".join(letters))
ok("Pad covers text", str(otp.key_covers_text))

# ─────────────────────────────────────────────────────────────────────────────
header("RESEARCH - tabula recta")
fwd = research_tabula("H", "K", state)
ok(fwd.formula, fwd.workings)
rev = research_reverse_tabula("H", fwd.letter, state)
ok(rev.formula, rev.workings)

out = sys.argv[1] if len(sys.argv) > 1 else "tabula_recta.png"
with open(out, "wb") as fh:
    fh.write(render_tabula_png(highlight=("H", "K")))
ok("Tabula recta written", out)
print(f"{LINE}\n")
