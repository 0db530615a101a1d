"""Token dump discovery helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Generator, Iterable

DUMP_EXTENSIONS = (".yaml", ".yml", ".json")


def iter_dump_files(root_paths: Iterable[str], extensions: tuple[str, ...] = DUMP_EXTENSIONS) -> Generator[Path, None, None]:
    """Yield dump files beneath the provided directories, or the files themselves."""

    for root in root_paths:
        path = Path(root)
        if path.is_file():
            yield path
            continue
        for candidate in sorted(path.rglob("*")):
            if candidate.suffix in extensions and candidate.is_file():
                yield candidate
