from .main_tab     import MainTabResult, load_text_file, load_text_from_query, process_text
from .lab_tab      import caesar_experiment, generate_random_key, one_time_pad_experiment
from .research_tab import ResearchResult, research_reverse_tabula, research_tabula
