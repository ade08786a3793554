"""
Detail File Adapters - Storage for per-task sidecar files.
"""

from .filesystem import FileSystemDetailStore, resolve_detail_file_path

__all__ = ["FileSystemDetailStore", "resolve_detail_file_path"]
