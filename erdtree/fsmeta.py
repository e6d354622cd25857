"""Filesystem metadata: inodes, symlink targets, owners and extended attributes."""

import os
from dataclasses import dataclass
from pathlib import Path

try:
    import grp
    import pwd
except ImportError:  # pragma: no cover - platforms without a user database
    grp = None
    pwd = None


class InodeError(Exception):
    """Raised when metadata lacks what is needed to identify an inode."""

    def __init__(self, message="Insufficient information to compute inode"):
        super().__init__(message)


class UserGroupError(Exception):
    """Raised when a file's owner or group cannot be resolved."""


@dataclass(frozen=True)
class Inode:
    """A file's underlying inode."""

    ino: int
    dev: int
    nlink: int

    @classmethod
    def from_stat(cls, stat_result):
        """Build an inode from an ``os.stat`` result."""
        try:
            ino = stat_result.st_ino
            dev = stat_result.st_dev
            nlink = stat_result.st_nlink
        except AttributeError:
            raise InodeError() from None
        if ino is None or dev is None or nlink is None:
            raise InodeError()
        return cls(ino, dev, nlink)


def symlink_target(path):
    """Return the target of the symlink at ``path``, or ``None`` if it is not one."""
    try:
        if not os.path.islink(path):
            return None
        return Path(os.readlink(path))
    except OSError:
        return None


def _user_name(uid):
    if pwd is None:
        raise UserGroupError("Invalid user")
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        raise UserGroupError("Invalid user") from None


def _group_name(gid):
    if grp is None:
        raise UserGroupError("Invalid group")
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        raise UserGroupError("Invalid group") from None


def owner(stat_result):
    """Name of the user owning the file described by ``stat_result``."""
    return _user_name(stat_result.st_uid)


def owner_and_group(stat_result):
    """``(owner, group)`` names for the file described by ``stat_result``."""
    return _user_name(stat_result.st_uid), _group_name(stat_result.st_gid)


def has_xattrs(path):
    """True if ``path`` (or the file a symlink points to) has extended attributes."""
    listxattr = getattr(os, "listxattr", None)
    if listxattr is None:
        return False
    try:
        return len(listxattr(path)) > 0
    except OSError:
        return False