import os
from typing import List


def safe_call(func, *args, **kwargs):
    """Call a widget helper that may fail while the DOM is being torn down."""
    try:
        return func(*args, **kwargs)
    except Exception:
        pass
    return None


def read_lines(path: str) -> List[str]:
    """Read a text file as a list of lines without line terminators.

    Bytes that are not valid UTF-8 are replaced with U+FFFD. Raises
    ``OSError``; callers turn it into a display error.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        return fh.read().splitlines()


def describe_load_error(exc: BaseException) -> str:
    return f"An error occurred:\n\t{exc}"


def display_name(path: str) -> str:
    return os.path.basename(path.rstrip(os.sep)) or path
