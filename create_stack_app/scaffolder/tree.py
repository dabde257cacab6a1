"""In-memory project tree.

Every generation stage adds entries to a ``FileTree``; nothing touches the
disk until :meth:`FileTree.write` runs.  Entries keep the order in which they
were first added, so the same configuration always produces the same tree.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from pathlib import Path, PurePosixPath
from typing import Any

import yaml

from create_stack_app.utils import dump_json, ensure_dir, write_text

# Marker stored for directory entries.
_DIRECTORY = object()


def _normalise(path: str) -> str:
    posix = PurePosixPath(path)
    if posix.is_absolute() or ".." in posix.parts:
        raise ValueError(f"Tree paths must be relative and stay inside the project: {path!r}")
    return posix.as_posix()


class FileTree:
    """Ordered mapping of relative POSIX path -> file content or directory."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    # -- Building ----------------------------------------------------------

    def add_dir(self, path: str) -> None:
        self._entries.setdefault(_normalise(path), _DIRECTORY)

    def add_file(self, path: str, content: str) -> None:
        """Add (or replace) a text file.  Replacing keeps the original position."""
        self._entries[_normalise(path)] = content

    def add_json(self, path: str, data: dict[str, Any] | list[Any]) -> None:
        self.add_file(path, dump_json(data))

    def add_yaml(self, path: str, data: dict[str, Any]) -> None:
        """Add a YAML document.  Key order is preserved."""
        self.add_file(
            path,
            yaml.safe_dump(data, sort_keys=False, default_flow_style=False, width=120),
        )

    # -- Inspection --------------------------------------------------------

    def paths(self) -> list[str]:
        return list(self._entries)

    def files(self) -> list[str]:
        return [p for p, v in self._entries.items() if v is not _DIRECTORY]

    def directories(self) -> list[str]:
        return [p for p, v in self._entries.items() if v is _DIRECTORY]

    def content(self, path: str) -> str:
        """Return the text of the file at *path*.

        Raises:
            KeyError: If *path* is not in the tree or is a directory.
        """
        value = self._entries[_normalise(path)]
        if value is _DIRECTORY:
            raise KeyError(f"{path} is a directory")
        return value

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and _normalise(path) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    # -- Output ------------------------------------------------------------

    async def write(self, root: str | Path) -> Path:
        """Write the tree below *root*.

        Directories are created first, in insertion order, then every file.
        Filesystem errors propagate; files already written stay on disk.
        """
        root_path = Path(root)
        await asyncio.to_thread(ensure_dir, root_path)
        for directory in self.directories():
            await asyncio.to_thread(ensure_dir, root_path / directory)
        for path in self.files():
            await asyncio.to_thread(write_text, root_path / path, self._entries[path])
        return root_path
