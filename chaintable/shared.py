import sys
from typing import Any


def sprintf(format: str, *args: Any) -> str:
    return format.format(*args)


def printf(format: str, *args: Any):
    print(sprintf(format, *args), end="")


def printf_err(format: str, *args: Any):
    print(sprintf(format, *args), end="", file=sys.stderr)
