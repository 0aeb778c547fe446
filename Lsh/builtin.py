import os
import sys
from functools import partial
from types import MappingProxyType

from Lsh.config import CONTINUE, SHELL_NAME, TERMINATE


def builtin_cd(args):
    """Change directory"""
    if len(args) < 2:
        print(f'{SHELL_NAME}: expected argument to "cd"', file=sys.stderr)
        return CONTINUE
    try:
        os.chdir(args[1])
    except OSError as e:
        print(f"{SHELL_NAME}: {e}", file=sys.stderr)
    return CONTINUE


def builtin_help(names, args):
    """Print help message"""
    print(SHELL_NAME.upper())
    print("Type program names and arguments, and hit enter.")
    print("The following are built in:")
    for name in names:
        print(f"  {name}")
    print("Use the man command for information on other programs.")
    return CONTINUE


def builtin_exit(args):
    return TERMINATE


def builtin_history(history, args):
    """Show or clear command history"""
    if len(args) > 1:
        if args[1].lower() == "-c":
            try:
                history.clear()
            except OSError as e:
                print(f"Error clearing history: {e}", file=sys.stderr)
            else:
                print("History cleared successfully.")
        else:
            print(f"Invalid option: {args[1]}", file=sys.stderr)
            print("Usage: history [-c]", file=sys.stderr)
        return CONTINUE

    print("History of commands used:")
    if not history.exists():
        print("No history found.", file=sys.stderr)
        return CONTINUE
    try:
        records = history.read_all()
    except OSError as e:
        print(f"No history found: {e}", file=sys.stderr)
        return CONTINUE
    for record in records:
        print(record)
    return CONTINUE


def make_builtins(history):
    """
    Build the builtin table once at startup.
    Returns: read-only mapping name -> handler(args) -> continue flag
    """
    names = ("cd", "help", "exit", "history")
    table = {
        "cd": builtin_cd,
        "help": partial(builtin_help, names),
        "exit": builtin_exit,
        "history": partial(builtin_history, history),
    }
    return MappingProxyType({name: table[name] for name in names})
