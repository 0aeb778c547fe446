import sys

from Lsh.builtin import make_builtins
from Lsh.config import CONTINUE, SHELL_NAME
from Lsh.executor import execute
from Lsh.history import HistoryFile, current_directory
from Lsh.parser import split_line
from Lsh.prompt import init_readline, is_interactive, read_line


def main_loop(history=None, stdin=None, stdout=None):
    """
    Main shell loop: prompt, log, split, dispatch until `exit` or end of input.
    Returns: exit status
    """
    if history is None:
        history = HistoryFile()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    # Undecodable bytes pass through to history and to the child untouched
    if stdin is sys.stdin and hasattr(stdin, "reconfigure"):
        stdin.reconfigure(errors="surrogateescape")

    builtins = make_builtins(history)
    if is_interactive(stdin, stdout):
        init_readline(history)

    status = CONTINUE
    while status:
        try:
            line = read_line(stdin, stdout)
        except EOFError:
            print(file=stdout)
            break
        except KeyboardInterrupt:
            print(file=stdout)
            continue
        except UnicodeDecodeError as e:
            print(f"{SHELL_NAME}: {e}", file=sys.stderr)
            continue

        # Any raw content is logged, including whitespace-only lines
        if line:
            history.append(line, current_directory())

        args = split_line(line)
        status = execute(args, builtins)

    return 0
