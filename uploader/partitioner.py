"""Split a file size into an ordered chunk plan."""

from typing import Iterator

from uploader.types import ChunkRange


def count_chunks(file_size: int, chunk_size: int) -> int:
    """
    Number of chunks needed to cover ``file_size`` bytes.

    Args:
        file_size: File size in bytes (>= 0)
        chunk_size: Chunk size in bytes (> 0)

    Returns:
        ceil(file_size / chunk_size)

    Raises:
        ValueError: On a negative size or non-positive chunk size
    """
    if file_size < 0:
        raise ValueError(f"file_size must be >= 0, got {file_size}")
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be > 0, got {chunk_size}")
    return -(-file_size // chunk_size)


def plan_chunks(file_size: int, chunk_size: int) -> Iterator[ChunkRange]:
    """
    Yield the byte ranges that partition [0, file_size).

    Every range is ``chunk_size`` long except possibly the last. An empty file
    yields nothing. Each call recomputes the plan.

    Args:
        file_size: File size in bytes (>= 0)
        chunk_size: Chunk size in bytes (> 0)

    Yields:
        ChunkRange objects in index order
    """
    total = count_chunks(file_size, chunk_size)
    for index in range(total):
        start = index * chunk_size
        end = min(start + chunk_size, file_size)
        yield ChunkRange(index=index, start=start, end=end)
