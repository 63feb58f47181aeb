import os

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

_indentation = 0
_silent = False


def puts(text: str) -> None:
    if not _silent:
        print(f"{'  ' * _indentation}{text}")


# Prints the message and indents everything printed while the block runs...
@contextmanager
def message(text: str) -> Iterator[None]:
    global _indentation
    puts(text)
    _indentation += 1
    try:
        yield
    finally:
        _indentation -= 1


@contextmanager
def silent() -> Iterator[None]:
    global _silent
    previous = _silent
    _silent = True
    try:
        yield
    finally:
        _silent = previous


def path(value: Union[str, Path]) -> str:
    relative = os.path.relpath(str(value), os.getcwd())
    if relative.startswith(".."):
        return f"`{value}`"
    return f"`./{relative}`"
