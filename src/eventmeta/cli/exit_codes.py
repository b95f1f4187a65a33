#
#   project      : EventMeta
#   file         : exit_codes.py
#   file_relpath : src/eventmeta/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 EventMeta contributors
#

"""Exit codes for the EventMeta CLI.

EventMeta follows the BSD `sysexits` convention where practical so other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the EventMeta CLI.

    Attributes:
        SUCCESS: Successful execution (warnings may have been reported).
        WARNINGS: ``--strict`` was given and at least one warning was reported.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Source is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    WARNINGS = 1

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
