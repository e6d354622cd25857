import grp
import os
import pwd
from pathlib import Path
from types import SimpleNamespace

import pytest

from erdtree.fsmeta import (
    Inode,
    InodeError,
    UserGroupError,
    has_xattrs,
    owner,
    owner_and_group,
    symlink_target,
)


@pytest.fixture
def regular_file(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("hello")
    return path


def test_inode_from_stat_matches_stat(regular_file):
    st = os.stat(regular_file)
    inode = Inode.from_stat(st)
    assert inode == Inode(st.st_ino, st.st_dev, st.st_nlink)


def test_hard_links_share_inode(regular_file, tmp_path):
    link = tmp_path / "hard"
    os.link(regular_file, link)
    first = Inode.from_stat(os.stat(regular_file))
    second = Inode.from_stat(os.stat(link))
    assert first == second
    assert first.nlink == 2


def test_inode_error_on_missing_fields():
    with pytest.raises(InodeError):
        Inode.from_stat(SimpleNamespace(st_ino=1, st_dev=2))


def test_symlink_target(regular_file, tmp_path):
    link = tmp_path / "soft"
    os.symlink(regular_file, link)
    assert symlink_target(link) == regular_file


def test_symlink_target_none_for_regular_file(regular_file):
    assert symlink_target(regular_file) is None


def test_symlink_target_none_for_missing(tmp_path):
    assert symlink_target(tmp_path / "missing") is None


def test_owner_of_own_file(regular_file):
    st = os.stat(regular_file)
    assert owner(st) == pwd.getpwuid(st.st_uid).pw_name


def test_owner_and_group_of_own_file(regular_file):
    st = os.stat(regular_file)
    assert owner_and_group(st) == (
        pwd.getpwuid(st.st_uid).pw_name,
        grp.getgrgid(st.st_gid).gr_name,
    )


def test_unknown_user_raises():
    with pytest.raises(UserGroupError):
        owner(SimpleNamespace(st_uid=3_999_999_991, st_gid=0))


def test_unknown_group_raises():
    uid = os.getuid()
    with pytest.raises(UserGroupError):
        owner_and_group(SimpleNamespace(st_uid=uid, st_gid=3_999_999_991))


def test_has_xattrs_false_for_missing_path(tmp_path):
    assert has_xattrs(Path(tmp_path / "missing")) is False