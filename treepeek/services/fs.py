from __future__ import annotations

import sys
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    def expanduser(self, path: str) -> str: ...

    def exists(self, path: str) -> bool: ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str: ...

    def read_stdin(self) -> str: ...


class OsFileSystem:
    def expanduser(self, path: str) -> str:
        return str(Path(path).expanduser())

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)

    def read_stdin(self) -> str:
        return sys.stdin.read()


DEFAULT_FS: FileSystem = OsFileSystem()
