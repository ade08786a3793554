"""
Filesystem Detail Store - Read and write task detail files on disk.
"""

import logging
from pathlib import Path
from typing import Union

from ...core.exceptions import DetailFileError
from ...core.ports.detail_store import DetailStorePort


def resolve_detail_file_path(
    detail_path: Union[str, Path],
    board_path: Union[str, Path],
) -> Path:
    """
    Resolve a task's detail path against the board file.

    Absolute paths are returned unchanged; relative ones are taken relative
    to the directory containing the board file. Every read and write of a
    detail file goes through here so both sides agree on the location.
    """
    detail = Path(detail_path)
    if detail.is_absolute():
        return detail
    return (Path(board_path).parent / detail).resolve()


class FileSystemDetailStore(DetailStorePort):
    """Detail store backed by the local filesystem (UTF-8 text)."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self.logger = logging.getLogger("FileSystemDetailStore")

    def read(self, path: Path) -> str:
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DetailFileError(f"Failed to read detail file: {path}", path, e) from e

    def write(self, path: Path, text: str) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding=self.encoding)
        except OSError as e:
            raise DetailFileError(f"Failed to write detail file: {path}", path, e) from e
        self.logger.debug(f"Wrote detail file {path}")
