import sys

from Lsh.config import MAX_HISTORY, PROMPT

try:
    import readline
except ImportError:
    import pyreadline3 as readline


def get_prompt():
    return PROMPT


def init_readline(history):
    """Configure readline like a Linux terminal and preload past commands."""
    try:
        readline.parse_and_bind("set editing-mode emacs")
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.clear_history()
        for entry in history.entries()[-MAX_HISTORY:]:
            readline.add_history(entry.line)
        readline.set_history_length(MAX_HISTORY)
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def is_interactive(stdin, stdout):
    """True when lines come from the terminal through input() and readline."""
    try:
        return stdin is sys.stdin and stdout is sys.stdout and stdin.isatty()
    except ValueError:
        return False


def read_line(stdin=None, stdout=None):
    """
    Show the prompt and read one line.
    Returns: the line without its line break
    Raises: EOFError at end of input
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if is_interactive(stdin, stdout):
        return input(get_prompt())

    stdout.write(get_prompt())
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError
    if line.endswith("\n"):
        line = line[:-1]
    return line
