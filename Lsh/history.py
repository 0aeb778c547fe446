import os
import re
import sys
from collections import namedtuple
from datetime import datetime

from Lsh.config import HISTORY_FILE, TIMESTAMP_FORMAT

HistoryEntry = namedtuple("HistoryEntry", ["timestamp", "cwd", "line"])

# The cwd ends at the first "] ", so a directory name containing "] " is
# split wrongly; a "] " inside the command line itself is kept intact.
_RECORD = re.compile(r"^\[(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] \[(.*?)\] (.*)$")


def format_entry(entry):
    """Encode one entry as `[timestamp] [cwd] line`"""
    return f"[{entry.timestamp}] [{entry.cwd}] {entry.line}"


def parse_entry(text):
    """
    Decode a stored record.
    Returns: HistoryEntry, or None if the text is not a record
    """
    m = _RECORD.match(text.rstrip("\n"))
    if not m:
        return None
    return HistoryEntry(*m.groups())


def current_directory():
    try:
        return os.getcwd()
    except OSError as e:
        print(f"getcwd error: {e}", file=sys.stderr)
        return "unknown"


class HistoryFile:
    """Append-only command log kept in a plain text file, one record per line."""

    def __init__(self, path=HISTORY_FILE):
        self.path = path

    def append(self, line, cwd=None, when=None):
        """
        Record a raw command line. Failures are reported and swallowed so
        that logging never stops a command from running.
        """
        if cwd is None:
            cwd = current_directory()
        when = (when or datetime.now()).strftime(TIMESTAMP_FORMAT)
        try:
            with open(self.path, "a", encoding="utf-8", errors="surrogateescape") as f:
                f.write(format_entry(HistoryEntry(when, cwd, line)) + "\n")
        except (OSError, UnicodeError) as e:
            print(f"Warning: Could not save history: {e}", file=sys.stderr)

    def exists(self):
        return os.path.exists(self.path)

    def read_all(self):
        """
        Read every stored record in original order.
        Returns: list of raw record lines (without trailing newline)
        Raises: OSError if the file exists but cannot be read
        """
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                return [rec.rstrip("\n") for rec in f]
        except FileNotFoundError:
            return []

    def entries(self):
        """Parsed records; lines that are not records are skipped."""
        parsed = (parse_entry(rec) for rec in self.read_all())
        return [e for e in parsed if e is not None]

    def clear(self):
        """Remove every record. Raises OSError if the file cannot be removed."""
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
