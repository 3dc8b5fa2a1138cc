"""Pre-order directory traversal for a language's challenge tree."""

from __future__ import annotations

import os
import stat as stat_module
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union


@dataclass(frozen=True)
class WalkEntry:
    """One file or directory below the walk root.

    ``path`` is relative to the root; entries directly below the root have
    depth 1.
    """

    name: str
    path: str
    full_path: Path
    depth: int
    stat: os.stat_result

    @property
    def is_dir(self) -> bool:
        return stat_module.S_ISDIR(self.stat.st_mode)


def walk(root: Union[str, Path]) -> Iterator[WalkEntry]:
    """Yield every entry below ``root``, each directory before its contents.

    Siblings are visited in name order so the traversal is deterministic.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise FileNotFoundError(f"Challenge root {root_path} does not exist")
    yield from _walk(root_path, "", 1)


def _walk(directory: Path, prefix: str, depth: int) -> Iterator[WalkEntry]:
    with os.scandir(directory) as handle:
        entries = sorted(handle, key=lambda item: item.name)
    for entry in entries:
        relative = os.path.join(prefix, entry.name) if prefix else entry.name
        yield WalkEntry(
            name=entry.name,
            path=relative,
            full_path=Path(entry.path),
            depth=depth,
            stat=entry.stat(),
        )
        if entry.is_dir():
            yield from _walk(Path(entry.path), relative, depth + 1)


__all__ = ["WalkEntry", "walk"]
