from pathlib import Path, PurePath
from typing import Protocol


class Filesystem(Protocol):
    def create_directories(self, path: PurePath) -> None:
        ...

    def write_bytes(self, path: PurePath, content: bytes) -> None:
        ...


class LocalFS:
    def create_directories(self, path: PurePath) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_bytes(self, path: PurePath, content: bytes) -> None:
        Path(path).write_bytes(content)


LOCAL_FS: Filesystem = LocalFS()
