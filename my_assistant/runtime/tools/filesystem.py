from __future__ import annotations

import asyncio
import os
import re
from pathlib import Path
from typing import List, Optional


class FileListError(RuntimeError):
    pass


def glob_to_regex(pattern: str) -> "re.Pattern[str]":
    """
    Translate a file-list glob into a regex matched against the whole relative path.

      **/  zero or more leading directories
      **   anything, separators included
      *    anything within one path segment (a leading * may cross segments)
      ?    one character other than a separator
    """
    out: List[str] = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append(".*" if i == 0 else "[^/]*")
            i += 1
        elif pattern[i] == "?":
            out.append("[^/]")
            i += 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(out))


def _walk_files(root: Path) -> List[str]:
    files: List[str] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise):
        base = Path(dirpath)
        for name in filenames:
            files.append((base / name).relative_to(root).as_posix())
    return sorted(files)


def _raise(err: OSError) -> None:
    raise err


def _top_level_files(root: Path) -> List[str]:
    return sorted(c.name for c in root.iterdir() if c.is_file())


def _list_files_sync(root: Path, pattern: Optional[str], recursive: bool) -> List[str]:
    if not root.exists():
        raise FileNotFoundError(f"No such directory: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")
    files = _walk_files(root) if recursive else _top_level_files(root)
    if pattern:
        rx = glob_to_regex(pattern)
        files = [f for f in files if rx.fullmatch(f)]
    return files


async def list_files(directory: Optional[str] = None, *, pattern: Optional[str] = None, recursive: bool = True) -> dict:
    target = directory or os.getcwd()
    try:
        files = await asyncio.to_thread(_list_files_sync, Path(target), pattern, recursive)
    except OSError as e:
        raise FileListError(f"Failed to list directory: {e}") from e
    return {"directory": target, "files": files, "count": len(files)}
