from types import SimpleNamespace

import pytest

from erdtree.file_size import (
    BlockMetric,
    ByteKind,
    ByteMetric,
    DiskUsage,
    LineMetric,
    WordMetric,
    empty_file_size,
)
from erdtree.units import PrefixKind


def _metric(value, human, prefix):
    return ByteMetric(
        value=value, human_readable=human, kind=ByteKind.LOGICAL, prefix_kind=prefix
    )


@pytest.mark.parametrize(
    "value, human, prefix, expected",
    [
        (100, False, PrefixKind.BIN, "100 B"),
        (1000, True, PrefixKind.SI, "1.0 KB"),
        (1000, True, PrefixKind.BIN, "1000 B"),
        (1024, True, PrefixKind.BIN, "1.0 KiB"),
        (2**20, True, PrefixKind.BIN, "1.0 MiB"),
        (123_454, False, PrefixKind.BIN, "123454 B"),
    ],
)
def test_byte_metric_display(value, human, prefix, expected):
    assert str(_metric(value, human, prefix)) == expected


def test_byte_metric_display_is_stable():
    metric = _metric(1024, True, PrefixKind.BIN)
    first = str(metric)
    second = str(metric)
    assert first == "1.0 KiB"
    assert second == "1.0 KiB"


def test_byte_metric_iadd_refreshes_display():
    metric = _metric(1000, True, PrefixKind.SI)
    assert str(metric) == "1.0 KB"
    metric += _metric(1000, True, PrefixKind.SI)
    assert metric.value == 2000
    assert str(metric) == "2.0 KB"


def test_byte_metric_logical_uses_size():
    st = SimpleNamespace(st_size=4321, st_blocks=16)
    metric = ByteMetric.logical(st, PrefixKind.BIN, False)
    assert metric.value == 4321
    assert metric.kind is ByteKind.LOGICAL


def test_byte_metric_physical_uses_blocks():
    st = SimpleNamespace(st_size=100, st_blocks=1)
    metric = ByteMetric.physical(st, PrefixKind.BIN, False)
    assert metric.value == 512
    assert metric.kind is ByteKind.PHYSICAL


def test_byte_metric_physical_falls_back_to_size():
    st = SimpleNamespace(st_size=100)
    assert ByteMetric.physical(st, PrefixKind.SI, False).value == 100


def test_line_and_word_counts(tmp_path):
    path = tmp_path / "poem.txt"
    path.write_bytes(b"one two\r\nthree\n\nfour five six\n")
    assert LineMetric.from_path(path).value == 4
    assert WordMetric.from_path(path).value == 6


def test_line_count_without_trailing_newline(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("a\nb", encoding="utf-8")
    assert LineMetric.from_path(path).value == 2


def test_empty_file_counts(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert LineMetric.from_path(path).value == 0
    assert WordMetric.from_path(path).value == 0


def test_non_utf8_is_none(tmp_path):
    path = tmp_path / "bin.dat"
    path.write_bytes(b"\xff\xfe\x00\x80")
    assert LineMetric.from_path(path) is None
    assert WordMetric.from_path(path) is None


def test_missing_file_is_none(tmp_path):
    assert LineMetric.from_path(tmp_path / "nope") is None


def test_block_metric():
    metric = BlockMetric.from_stat(SimpleNamespace(st_blocks=8))
    metric += BlockMetric(4)
    assert metric.value == 12
    assert str(metric) == "12"


@pytest.mark.parametrize(
    "usage, cls",
    [
        (DiskUsage.LOGICAL, ByteMetric),
        (DiskUsage.PHYSICAL, ByteMetric),
        (DiskUsage.LINE, LineMetric),
        (DiskUsage.WORD, WordMetric),
        (DiskUsage.BLOCK, BlockMetric),
    ],
)
def test_empty_file_size(usage, cls):
    metric = empty_file_size(usage, True, PrefixKind.SI)
    assert type(metric) is cls
    assert metric.value == 0


def test_empty_byte_kind_follows_usage():
    assert empty_file_size(DiskUsage.PHYSICAL, False, PrefixKind.BIN).kind is ByteKind.PHYSICAL
    assert empty_file_size(DiskUsage.LOGICAL, False, PrefixKind.BIN).kind is ByteKind.LOGICAL


def test_accumulate_mixed_metrics():
    total = empty_file_size(DiskUsage.LINE, False, PrefixKind.BIN)
    total += LineMetric(3)
    total += LineMetric(5)
    assert str(total) == "8"