import sys
from typing import Any

DEBUG = False


def set_debug(enabled: bool) -> None:
    global DEBUG
    DEBUG = enabled


def dprint(*args: Any, **kwargs: Any) -> None:
    if DEBUG:
        print(*args, **kwargs, file=sys.stderr)
