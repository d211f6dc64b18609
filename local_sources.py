"""Read card-transaction exports from local files and folders."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable

from parsing import SUPPORTED_EXTENSIONS


class StatementFile(io.BytesIO):
    """Export bytes held in memory, named after the path they came from."""

    def __init__(self, source: Path, content: bytes) -> None:
        super().__init__(content)
        self.name = str(source)


def _is_export(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in SUPPORTED_EXTENSIONS


def collect_statement_paths(folder: str, recursive: bool = False) -> list[Path]:
    """CSV exports inside ``folder``, in file-name order."""
    base = Path(folder).expanduser()
    if not base.exists():
        raise FileNotFoundError(f"Statement folder not found: {base}")
    if not base.is_dir():
        raise NotADirectoryError(f"Expected a folder of exports: {base}")

    candidates = base.rglob("*") if recursive else base.iterdir()
    return sorted(filter(_is_export, candidates))


def resolve_input_paths(inputs: Iterable[str], recursive: bool = False) -> list[Path]:
    """Expand a mix of file and folder arguments into export file paths."""
    paths: list[Path] = []
    for item in inputs:
        target = Path(item).expanduser()
        if target.is_dir():
            paths.extend(collect_statement_paths(str(target), recursive=recursive))
        elif target.is_file():
            paths.append(target)
        else:
            raise FileNotFoundError(f"No such file or folder: {target}")
    return paths


def read_statement_files(inputs: Iterable[str], recursive: bool = False, limit: int = 200) -> list[StatementFile]:
    """Load export files into memory for ``parsing.merge_transactions``."""
    paths = resolve_input_paths(inputs, recursive=recursive)[: int(limit)]
    return [StatementFile(path, path.read_bytes()) for path in paths]
