import sys

from Lsh.config import SHELL_NAME
from Lsh.shell import main_loop


def main():
    try:
        return main_loop()
    except MemoryError:
        # Running out of memory for line or token storage is fatal
        print(f"{SHELL_NAME}: allocation error", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
