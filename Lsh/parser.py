import re

from Lsh.config import TOKEN_DELIMITERS

_WORD = re.compile("[^" + re.escape(TOKEN_DELIMITERS) + "]+")


def split_line(line):
    """
    Split a command line into words.
    Returns: list of non-empty tokens (empty list for a blank line)

    Only the characters in TOKEN_DELIMITERS separate words; there is no
    quoting, so a delimiter can never be part of a token.
    """
    return _WORD.findall(line)
