"""Reading whole text files and writing text files."""

from __future__ import annotations

import os
from typing import IO

from vang import log


def read_file(path: str | os.PathLike[str]) -> str | None:
    """Return the file's text with a trailing newline, or None if it cannot be read."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError:
        log.error("Could not read file!")
        return None
    return text + "\n"


class FileWriter:
    """A text file opened for writing, truncated or appended to."""

    def __init__(self, path: str | os.PathLike[str], truncate: bool = True) -> None:
        self.path = os.fspath(path)
        self._handle: IO[str] | None = open(
            self.path, "w" if truncate else "a", encoding="utf-8", newline=""
        )

    def _stream(self) -> IO[str]:
        if self._handle is None:
            raise ValueError("write to a closed FileWriter")
        return self._handle

    def write(self, text: str) -> None:
        """Write text as it is."""
        self._stream().write(text)

    def write_line(self, text: str) -> None:
        """Write text followed by a newline."""
        stream = self._stream()
        stream.write(text)
        stream.write("\n")

    def clear(self) -> None:
        """Empty the file and keep writing from its start."""
        self.close()
        self._handle = open(self.path, "w", encoding="utf-8", newline="")

    def close(self) -> None:
        """Flush and close the file."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> FileWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()