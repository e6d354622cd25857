"""Enumerations for the command-line choices that shape the output."""

from enum import Enum


class Coloring(Enum):
    """How output should be colorized; ``AUTO`` by default."""

    NONE = "none"
    AUTO = "auto"
    FORCE = "force"


class DirOrder(Enum):
    """Where directories are placed relative to other files; ``NONE`` by default."""

    NONE = "none"
    FIRST = "first"
    LAST = "last"


class EntryType(Enum):
    """File types common to all platforms; ``FILE`` by default."""

    FILE = "file"
    DIR = "dir"
    LINK = "link"


class Layout(Enum):
    """Which layout to use when rendering the tree; ``REGULAR`` by default."""

    REGULAR = "regular"
    INVERTED = "inverted"
    FLAT = "flat"
    IFLAT = "iflat"


class SortType(Enum):
    """Order in which entries are printed; ``SIZE`` by default."""

    NAME = "name"
    RNAME = "rname"
    SIZE = "size"
    RSIZE = "rsize"
    ACCESS = "access"
    RACCESS = "raccess"
    CREATE = "create"
    RCREATE = "rcreate"
    MOD = "mod"
    RMOD = "rmod"


class TimeStamp(Enum):
    """Kind of timestamp shown in long view; ``MOD`` by default."""

    CREATE = "create"
    ACCESS = "access"
    MOD = "mod"

    @classmethod
    def parse(cls, value):
        """Return the member named by ``value`` or one of its aliases."""
        name = _TIME_ALIASES.get(value, value)
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"invalid timestamp kind: {value!r}") from None


_TIME_ALIASES = {"ctime": "create", "atime": "access", "mtime": "mod"}


class TimeFormat(Enum):
    """Formatting of timestamps; ``DEFAULT`` by default."""

    ISO = "iso"
    ISO_STRICT = "iso-strict"
    SHORT = "short"
    DEFAULT = "default"