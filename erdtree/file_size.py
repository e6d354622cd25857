"""The different metrics by which a file's size can be reported."""

import re
from dataclasses import dataclass, field
from enum import Enum

from erdtree.units import BinPrefix, PrefixKind, SiPrefix

BLOCK_SIZE_BYTES = 512

# Characters with the Unicode White_Space property.
_NON_WHITESPACE = re.compile(
    "[^\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


class DiskUsage(Enum):
    """Which metric is used to report size; ``PHYSICAL`` by default."""

    LOGICAL = "logical"
    PHYSICAL = "physical"
    LINE = "line"
    WORD = "word"
    BLOCK = "block"


class ByteKind(Enum):
    """Logical bytes are a file's length; physical bytes are what it occupies on disk."""

    LOGICAL = "logical"
    PHYSICAL = "physical"


@dataclass
class ByteMetric:
    """File size in bytes, displayed plainly or with binary or SI prefixes."""

    value: int = 0
    human_readable: bool = False
    kind: ByteKind = ByteKind.LOGICAL
    prefix_kind: PrefixKind = PrefixKind.BIN
    _cached_display: str = field(default="", init=False, repr=False, compare=False)

    @classmethod
    def logical(cls, stat_result, prefix_kind, human_readable):
        """Metric holding the total number of bytes in a file."""
        return cls(stat_result.st_size, human_readable, ByteKind.LOGICAL, prefix_kind)

    @classmethod
    def physical(cls, stat_result, prefix_kind, human_readable):
        """Metric holding the bytes used to store a file on disk."""
        blocks = getattr(stat_result, "st_blocks", None)
        value = blocks * BLOCK_SIZE_BYTES if blocks is not None else stat_result.st_size
        return cls(value, human_readable, ByteKind.PHYSICAL, prefix_kind)

    @classmethod
    def empty(cls, kind, human_readable, prefix_kind):
        """Zero-valued metric of the given kind."""
        return cls(0, human_readable, kind, prefix_kind)

    def __str__(self):
        if self._cached_display:
            return self._cached_display

        prefix_cls = SiPrefix if self.prefix_kind is PrefixKind.SI else BinPrefix
        if self.human_readable:
            unit = prefix_cls.from_value(self.value)
            if unit is prefix_cls.BASE:
                display = f"{self.value} {unit}"
            else:
                size = self.value / unit.base_value()
                display = f"{size:.1f} {unit}"
        else:
            display = f"{self.value} {prefix_cls.BASE}"

        self._cached_display = display
        return display

    def __iadd__(self, other):
        self.value += other.value
        self._cached_display = ""
        return self


def _read_utf8(path):
    try:
        with open(path, "rb") as fh:
            return fh.read().decode("utf-8")
    except (OSError, UnicodeDecodeError):
        return None


@dataclass
class LineMetric:
    """File size measured in lines."""

    value: int = 0

    @classmethod
    def from_path(cls, path):
        """Count the lines of a UTF-8 file; ``None`` if it is unreadable or not UTF-8."""
        data = _read_utf8(path)
        if data is None:
            return None
        if not data:
            return cls(0)
        count = data.count("\n") + (0 if data.endswith("\n") else 1)
        return cls(count)

    def __str__(self):
        return str(self.value)

    def __iadd__(self, other):
        self.value += other.value
        return self


@dataclass
class WordMetric:
    """File size measured in whitespace-delimited words."""

    value: int = 0

    @classmethod
    def from_path(cls, path):
        """Count the words of a UTF-8 file; ``None`` if it is unreadable or not UTF-8."""
        data = _read_utf8(path)
        if data is None:
            return None
        return cls(sum(1 for _ in _NON_WHITESPACE.finditer(data)))

    def __str__(self):
        return str(self.value)

    def __iadd__(self, other):
        self.value += other.value
        return self


@dataclass
class BlockMetric:
    """File size measured in allocated 512-byte blocks."""

    value: int = 0

    @classmethod
    def from_stat(cls, stat_result):
        """Metric holding the number of blocks allocated to the file."""
        return cls(stat_result.st_blocks)

    def __str__(self):
        return str(self.value)

    def __iadd__(self, other):
        self.value += other.value
        return self


def empty_file_size(disk_usage, human_readable, prefix_kind):
    """Return a zero-valued metric appropriate for ``disk_usage``."""
    if disk_usage is DiskUsage.LOGICAL:
        return ByteMetric.empty(ByteKind.LOGICAL, human_readable, prefix_kind)
    if disk_usage is DiskUsage.PHYSICAL:
        return ByteMetric.empty(ByteKind.PHYSICAL, human_readable, prefix_kind)
    if disk_usage is DiskUsage.LINE:
        return LineMetric()
    if disk_usage is DiskUsage.WORD:
        return WordMetric()
    if disk_usage is DiskUsage.BLOCK:
        return BlockMetric()
    raise ValueError(f"unknown disk usage metric: {disk_usage!r}")