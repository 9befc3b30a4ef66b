"""
MARK - Line Store
=================
Newline-delimited text files: whole-file reads, whole-file replacement,
single-line appends. Every OSError surfaces as StorageError.
"""

import contextlib
import logging
import os
import shutil
from pathlib import Path
from typing import Iterable, List

from .errors import StorageError

logger = logging.getLogger("mark.store")

FILE_MODE = 0o666


class LineStore:
    """One text file holding one record per line"""

    def __init__(self, path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"LineStore({str(self.path)!r})"

    def ensure(self) -> None:
        """Create the file (and its directory) empty if it does not exist"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, FILE_MODE)
            os.close(fd)
        except OSError as e:
            raise StorageError(f"Cannot create {self.path}: {e}") from e

    def read(self) -> List[str]:
        """All non-empty lines in file order; a missing file reads as empty"""
        self.ensure()
        try:
            data = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        lines = [line for line in data.split("\n") if len(line) > 0]
        logger.debug(f"Read {len(lines)} lines from {self.path}")
        return lines

    def write_all(self, lines: Iterable[str]) -> None:
        """Replace the file's contents with the lines joined by newline"""
        lines = list(lines)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text("\n".join(lines), encoding="utf-8")
            if self.path.exists():
                shutil.copymode(self.path, tmp)
            os.replace(tmp, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"Cannot write {self.path}: {e}") from e

        logger.debug(f"Wrote {len(lines)} lines to {self.path}")

    def append(self, line: str) -> None:
        """Add one line at the end without reading the file"""
        self.ensure()
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            raise StorageError(f"Cannot append to {self.path}: {e}") from e

        logger.debug(f"Appended 1 line to {self.path}")
