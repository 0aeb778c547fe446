import os

SHELL_NAME = "lsh"
PROMPT = "> "

# Word separators: space, tab, carriage return, newline, bell
TOKEN_DELIMITERS = " \t\r\n\a"

# Resolved once at import so `cd` does not move the history file
HISTORY_FILE = os.path.abspath("history.txt")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Entries loaded into readline for arrow-key recall
MAX_HISTORY = 1000

# Continuation signal returned by builtins and the launcher
CONTINUE = True
TERMINATE = False
