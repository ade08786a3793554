"""
Exit Codes - Process exit statuses for the mdkanban CLI.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    FILE_NOT_FOUND = 2
