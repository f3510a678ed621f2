"""Tests for chunk planning."""

import pytest

from common.constants import UPLOAD_CHUNK_SIZE
from uploader.partitioner import count_chunks, plan_chunks
from uploader.types import ChunkRange, LocalFile


def test_plan_twenty_megabytes_default_chunks():
    """20,000,000 bytes in 8 MiB chunks gives three ranges."""
    ranges = list(plan_chunks(20_000_000, 8_388_608))

    assert ranges == [
        ChunkRange(index=0, start=0, end=8_388_608),
        ChunkRange(index=1, start=8_388_608, end=16_777_216),
        ChunkRange(index=2, start=16_777_216, end=20_000_000),
    ]
    assert UPLOAD_CHUNK_SIZE == 8_388_608


def test_empty_file_has_no_chunks():
    """A zero-byte file needs zero chunks."""
    assert list(plan_chunks(0, 1024)) == []
    assert count_chunks(0, 1024) == 0


def test_exact_multiple_has_no_short_tail():
    """When the size is a multiple of the chunk size every chunk is full."""
    ranges = list(plan_chunks(4096, 1024))

    assert len(ranges) == 4
    assert all(r.length == 1024 for r in ranges)


def test_file_smaller_than_one_chunk():
    """A file smaller than a chunk is one short range."""
    assert list(plan_chunks(10, 1024)) == [ChunkRange(index=0, start=0, end=10)]


@pytest.mark.parametrize("file_size", [1, 999, 1000, 1001, 12345, 100_000])
@pytest.mark.parametrize("chunk_size", [1, 7, 1000, 4096])
def test_ranges_partition_file(file_size, chunk_size):
    """Ranges cover [0, size) in order with no gaps or overlaps."""
    ranges = list(plan_chunks(file_size, chunk_size))

    assert len(ranges) == -(-file_size // chunk_size)
    assert ranges[0].start == 0
    assert ranges[-1].end == file_size
    for i, r in enumerate(ranges):
        assert r.index == i
        if i + 1 < len(ranges):
            assert r.end == ranges[i + 1].start
            assert r.length == chunk_size
    assert 0 < ranges[-1].length <= chunk_size


def test_plan_is_restartable():
    """Each call yields a fresh plan."""
    first = list(plan_chunks(5000, 1024))
    second = list(plan_chunks(5000, 1024))

    assert first == second


def test_invalid_arguments():
    """Negative sizes and non-positive chunk sizes are rejected."""
    with pytest.raises(ValueError):
        list(plan_chunks(-1, 1024))
    with pytest.raises(ValueError):
        list(plan_chunks(100, 0))


def test_chunks_reassemble_file(binary_file):
    """Reading every range in order reproduces the file."""
    source = LocalFile(str(binary_file))

    data = b''.join(source.read_range(r) for r in plan_chunks(source.size, 700))

    assert data == binary_file.read_bytes()


def test_short_read_raises(binary_file):
    """A range past the end of the file is an error."""
    source = LocalFile(str(binary_file))

    with pytest.raises(OSError):
        source.read_range(ChunkRange(index=9, start=2400, end=3000))
