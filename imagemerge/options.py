"""
Command line options for image_merge.py.

Flags are matched case-insensitively against OPTIONS, in declared order; the
first name that is a prefix of the token (after its '-' or '/') wins, so
"-offset1024", "-OFFSET 1024" and "/off..." style tokens all land on the same
entry as long as the table name is a prefix of what was typed.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, NamedTuple, Optional

OPTION_DELIMITERS = "-/"

ONE_KILOBYTE = 1024
OFFSET_ALIGN = 512
MIN_OFFSET = 512
MAX_OFFSET = 32768
DEFAULT_OFFSET = 512  # bytes, used as-is when -offset is not given


class OptionKind(Enum):
    PROG = "prog"
    FS = "fs"
    IMAGE = "image"
    OFFSET = "offset"
    FILLCHAR = "fillchar"
    VERBOSE = "verbose"
    HELP = "help"


class OptionSpec(NamedTuple):
    value_required: bool
    kind: OptionKind


# scan order matters: first prefix match wins
OPTIONS: Dict[str, OptionSpec] = {
    "prog": OptionSpec(True, OptionKind.PROG),
    "fs": OptionSpec(True, OptionKind.FS),
    "image": OptionSpec(True, OptionKind.IMAGE),
    "offset": OptionSpec(True, OptionKind.OFFSET),
    "fillchar": OptionSpec(True, OptionKind.FILLCHAR),
    "V": OptionSpec(False, OptionKind.VERBOSE),
    "H": OptionSpec(False, OptionKind.HELP),
}


class ParseStatus(Enum):
    MATCHED = 0
    MISSING_VALUE = 1
    NO_OPTION = 2
    NOT_FOUND = 3


class OptResult(NamedTuple):
    status: ParseStatus
    kind: Optional[OptionKind]
    value: Optional[str]  # option value, or the token itself for errors / no-value flags
    next_index: int


class UsageError(Exception):
    """Bad command line; the caller shows the help text and exits 0."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class Config:
    def __init__(self):
        self.prog: Optional[str] = None
        self.fs: Optional[str] = None
        self.image: Optional[str] = None
        self.offset = DEFAULT_OFFSET  # bytes
        self.fill = 0
        self.verbose = False

    def __repr__(self):
        return (f"Config(prog={self.prog!r}, fs={self.fs!r}, image={self.image!r}, "
                f"offset=0x{self.offset:X}, fill=0x{self.fill:02X}, verbose={self.verbose})")


def get_opt_val(argv: List[str], idx: int) -> OptResult:
    """
    Parse the option at argv[idx].
    The value is either glued to the flag ("-offset1024") or the next argument.
    """
    token = argv[idx]
    if not token or token[0] not in OPTION_DELIMITERS:
        return OptResult(ParseStatus.NO_OPTION, None, token, idx + 1)

    word = token[1:]
    for name, spec in OPTIONS.items():
        if word.lower().startswith(name.lower()):
            break
    else:
        return OptResult(ParseStatus.NOT_FOUND, None, token, idx + 1)

    if not spec.value_required:
        return OptResult(ParseStatus.MATCHED, spec.kind, token, idx + 1)

    value = word[len(name):]
    if value:
        return OptResult(ParseStatus.MATCHED, spec.kind, value, idx + 1)

    if idx + 1 >= len(argv):
        return OptResult(ParseStatus.MISSING_VALUE, spec.kind, token, idx + 1)
    return OptResult(ParseStatus.MATCHED, spec.kind, argv[idx + 1], idx + 2)


def parse_offset(value: str) -> int:
    """KiB value from the command line (512, 1024 ... 32768) -> byte offset."""
    try:
        offset = int(value, 10)
    except ValueError:
        raise ValueError(f"Invalid offset {value}. Must be a multiple of {OFFSET_ALIGN}") from None

    if offset % OFFSET_ALIGN != 0:
        raise ValueError(f"Invalid offset {offset}. Must be a multiple of {OFFSET_ALIGN}")
    if not MIN_OFFSET <= offset <= MAX_OFFSET:
        raise ValueError(f"Invalid offset {offset}. Must be between {MIN_OFFSET} and {MAX_OFFSET}")
    return offset * ONE_KILOBYTE


def parse_fill(value: str) -> int:
    # "0x.." -> that byte value, anything else -> code of its first character ("A" -> 0x41)
    if value[:2].lower() == "0x":
        try:
            fill = int(value, 16)
        except ValueError:
            raise ValueError(f"Invalid fill character {value}") from None
    else:
        fill = ord(value[0]) if value else 0

    if not 0 <= fill <= 0xFF:
        raise ValueError(f"Invalid fill character {value}")
    return fill


def parse_options(argv: List[str]) -> Config:
    """
    Build a Config from argv (without the program name).
    Raises UsageError for anything that should end in the help text, and
    ValueError for values that fail validation.
    """
    if not argv:
        raise UsageError()

    cfg = Config()
    idx = 0
    while idx < len(argv):
        res = get_opt_val(argv, idx)
        idx = res.next_index

        if res.status is ParseStatus.MISSING_VALUE:
            raise UsageError(f"Missing value for {res.value}")
        if res.status is ParseStatus.NO_OPTION:
            raise UsageError("No options given")
        if res.status is ParseStatus.NOT_FOUND:
            raise UsageError(f"{res.value} illegal option")

        kind = res.kind
        if kind is OptionKind.PROG:
            cfg.prog = res.value
        elif kind is OptionKind.FS:
            cfg.fs = res.value
        elif kind is OptionKind.IMAGE:
            cfg.image = res.value
        elif kind is OptionKind.OFFSET:
            cfg.offset = parse_offset(res.value)
        elif kind is OptionKind.FILLCHAR:
            cfg.fill = parse_fill(res.value)
        elif kind is OptionKind.VERBOSE:
            cfg.verbose = True
        elif kind is OptionKind.HELP:
            raise UsageError()

    if not cfg.image:
        raise ValueError("No output image given")
    return cfg
