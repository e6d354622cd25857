import pytest

from erdtree.options import (
    Coloring,
    DirOrder,
    EntryType,
    Layout,
    SortType,
    TimeFormat,
    TimeStamp,
)


@pytest.mark.parametrize(
    "enum_cls",
    [Coloring, DirOrder, EntryType, Layout, SortType, TimeStamp, TimeFormat],
)
def test_values_round_trip(enum_cls):
    for member in enum_cls:
        assert enum_cls(member.value) is member


def test_layout_iflat():
    assert Layout("iflat") is Layout.IFLAT


def test_time_format_kebab_case():
    assert TimeFormat("iso-strict") is TimeFormat.ISO_STRICT


@pytest.mark.parametrize(
    "alias, member",
    [("ctime", TimeStamp.CREATE), ("atime", TimeStamp.ACCESS), ("mtime", TimeStamp.MOD)],
)
def test_time_stamp_aliases(alias, member):
    assert TimeStamp.parse(alias) is member


def test_time_stamp_parse_names():
    for member in TimeStamp:
        assert TimeStamp.parse(member.value) is member


def test_time_stamp_parse_invalid():
    with pytest.raises(ValueError):
        TimeStamp.parse("birthday")


def test_unknown_sort_rejected():
    with pytest.raises(ValueError):
        SortType("random")