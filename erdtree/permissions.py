"""Unix file types and permissions rendered in symbolic or octal notation."""

import stat
from dataclasses import dataclass
from enum import Enum


class PermissionsError(Exception):
    """Raised when a mode does not describe a known file type."""


class FileType(Enum):
    """Unix file types with the identifiers shown by ``ls -l``."""

    DIRECTORY = "d"
    FILE = "."
    SYMLINK = "l"
    FIFO = "p"
    SOCKET = "s"
    CHAR_DEVICE = "c"
    BLOCK_DEVICE = "b"

    @classmethod
    def from_mode(cls, mode):
        """Return the file type encoded in the ``S_IFMT`` bits of ``mode``."""
        try:
            return _FILE_TYPES[stat.S_IFMT(mode)]
        except KeyError:
            raise PermissionsError("Encountered an unknown file type.") from None

    def identifier(self):
        """Single-character identifier for this file type."""
        return self.value


_FILE_TYPES = {
    stat.S_IFIFO: FileType.FIFO,
    stat.S_IFCHR: FileType.CHAR_DEVICE,
    stat.S_IFDIR: FileType.DIRECTORY,
    stat.S_IFBLK: FileType.BLOCK_DEVICE,
    stat.S_IFREG: FileType.FILE,
    stat.S_IFLNK: FileType.SYMLINK,
    stat.S_IFSOCK: FileType.SOCKET,
}


class PermissionClass(Enum):
    """The class a permissions triad belongs to."""

    USER = "user"
    GROUP = "group"
    OTHER = "other"


class Attribute(Enum):
    """Special attributes: setuid, setgid and the sticky bit."""

    SUID = "suid"
    SGID = "sgid"
    STICKY = "sticky"


class Triad(Enum):
    """Read, write and execute combinations."""

    READ = (True, False, False)
    WRITE = (False, True, False)
    EXECUTE = (False, False, True)
    READ_WRITE = (True, True, False)
    READ_EXECUTE = (True, False, True)
    WRITE_EXECUTE = (False, True, True)
    READ_WRITE_EXECUTE = (True, True, True)
    NONE = (False, False, False)


def _enabled(st_mode, mask):
    return st_mode & mask == mask


@dataclass(frozen=True)
class Permissions:
    """The permissions of one class: user, group or other."""

    permission_class: PermissionClass
    attr: "Attribute | None"
    triad: Triad

    @classmethod
    def _from_bits(cls, permission_class, st_mode, r, w, x, special, attr):
        triad = Triad((_enabled(st_mode, r), _enabled(st_mode, w), _enabled(st_mode, x)))
        return cls(permission_class, attr if _enabled(st_mode, special) else None, triad)

    @classmethod
    def user(cls, st_mode):
        """Permissions of the owning user."""
        return cls._from_bits(
            PermissionClass.USER, st_mode,
            stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, Attribute.SUID,
        )

    @classmethod
    def group(cls, st_mode):
        """Permissions of the owning group."""
        return cls._from_bits(
            PermissionClass.GROUP, st_mode,
            stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, Attribute.SGID,
        )

    @classmethod
    def other(cls, st_mode):
        """Permissions of everyone else."""
        return cls._from_bits(
            PermissionClass.OTHER, st_mode,
            stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, Attribute.STICKY,
        )

    def attr_is_sticky(self):
        """True if the sticky bit is set."""
        return self.attr is Attribute.STICKY

    def __str__(self):
        r, w, x = self.triad.value
        head = ("r" if r else "-") + ("w" if w else "-")
        if self.permission_class is PermissionClass.OTHER and self.attr_is_sticky():
            tail = "t" if x else "T"
        elif self.attr is not None:
            tail = "s" if x else "S"
        else:
            tail = "x" if x else "-"
        return head + tail


@dataclass(frozen=True)
class FileMode:
    """A file's type and permissions, shown in symbolic notation by ``str``."""

    st_mode: int
    file_type: FileType
    user_permissions: Permissions
    group_permissions: Permissions
    other_permissions: Permissions

    @classmethod
    def from_mode(cls, st_mode):
        """Decode ``st_mode`` as returned by ``os.stat``."""
        return cls(
            st_mode,
            FileType.from_mode(st_mode),
            Permissions.user(st_mode),
            Permissions.group(st_mode),
            Permissions.other(st_mode),
        )

    def __str__(self):
        return (
            f"{self.file_type.identifier()}{self.user_permissions}"
            f"{self.group_permissions}{self.other_permissions}"
        )

    def octal(self):
        """Permission bits, including special attributes, in octal."""
        return format(self.st_mode & ~stat.S_IFMT(self.st_mode) & 0o7777, "o")

    def with_xattrs(self):
        """Symbolic notation marked as carrying extended attributes."""
        return f"{self}@"