from __future__ import annotations

from pathlib import Path
from typing import List, Protocol


class FileSystem(Protocol):
    """What the resource loader needs from a filesystem."""

    def exists(self, path: str) -> bool:
        ...

    def listdir(self, path: str) -> List[str]:
        ...

    def read_text(self, path: str) -> str:
        ...


class LocalFileSystem:
    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def listdir(self, path: str) -> List[str]:
        return [p.name for p in Path(path).iterdir()]

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")
