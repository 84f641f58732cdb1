"""Read board text files from disk."""

from pathlib import Path

from duel.errors import BoardFileError


def read_board_file(path: str | Path) -> list[str]:
    """Return the file's lines without line terminators.

    Lines end at "\\n"; a "\\r" before it is dropped too. Any other control
    character stays inside its row. OS and decoding failures become a
    BoardFileError.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BoardFileError(str(e)) from e

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
