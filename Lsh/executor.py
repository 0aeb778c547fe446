import signal
import subprocess
import sys

from Lsh.config import CONTINUE, SHELL_NAME


def wait_for(proc):
    """
    Block until the child has exited or been killed by a signal.
    Returns: Popen.returncode (negative signal number when killed)

    Popen.wait() does not return for a stopped child, and Ctrl+C in the
    shell only resumes the wait: the child is never left unreaped.
    """
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            continue


def launch(args):
    """
    Run an external program and wait for it to finish.
    Returns: CONTINUE
    """
    # Anything we printed must reach the terminal before the child writes
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        proc = subprocess.Popen(args)
    except FileNotFoundError:
        print(f"{SHELL_NAME}: {args[0]}: command not found", file=sys.stderr)
        return CONTINUE
    except PermissionError:
        print(f"{SHELL_NAME}: {args[0]}: permission denied", file=sys.stderr)
        return CONTINUE
    except OSError as e:
        print(f"{SHELL_NAME}: {e}", file=sys.stderr)
        return CONTINUE

    returncode = wait_for(proc)
    if returncode < 0:
        try:
            signame = signal.Signals(-returncode).name
        except ValueError:
            signame = str(-returncode)
        print(f"{SHELL_NAME}: {args[0]}: terminated by signal {signame}", file=sys.stderr)

    return CONTINUE


def execute(args, builtins):
    """
    Run a builtin if the command names one, otherwise launch a program.
    Returns: CONTINUE or TERMINATE
    """
    if not args:
        return CONTINUE

    handler = builtins.get(args[0])
    if handler is not None:
        return handler(args)

    return launch(args)
