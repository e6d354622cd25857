"""Binary and SI unit prefixes used to report disk usage."""

import math
from enum import Enum


class PrefixKind(Enum):
    """Whether to report sizes with binary or SI prefixes; ``BIN`` by default."""

    BIN = "bin"
    SI = "si"


class BinPrefix(Enum):
    """Binary prefixes, each a power of 1024 above the previous."""

    BASE = "B"
    KIBI = "KiB"
    MEBI = "MiB"
    GIBI = "GiB"
    TEBI = "TiB"

    @classmethod
    def from_value(cls, value):
        """Return the closest human-readable prefix for ``value`` bytes."""
        log = math.log2(float(value)) if value > 0 else -math.inf
        if log < 10.0:
            return cls.BASE
        if log < 20.0:
            return cls.KIBI
        if log < 30.0:
            return cls.MEBI
        if log < 40.0:
            return cls.GIBI
        return cls.TEBI

    def base_value(self):
        """Number of bytes one unit of this prefix stands for."""
        return 2 ** (10 * list(type(self)).index(self))

    def __str__(self):
        return self.value


class SiPrefix(Enum):
    """SI prefixes, each a power of 1000 above the previous."""

    BASE = "B"
    KILO = "KB"
    MEGA = "MB"
    GIGA = "GB"
    TERA = "TB"

    @classmethod
    def from_value(cls, value):
        """Return the closest human-readable prefix for ``value`` bytes."""
        log = math.log10(float(value)) if value > 0 else -math.inf
        if log < 3.0:
            return cls.BASE
        if log < 6.0:
            return cls.KILO
        if log < 9.0:
            return cls.MEGA
        if log < 12.0:
            return cls.GIGA
        return cls.TERA

    def base_value(self):
        """Number of bytes one unit of this prefix stands for."""
        return 10 ** (3 * list(type(self)).index(self))

    def __str__(self):
        return self.value