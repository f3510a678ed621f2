"""Tests for upload id generation and the size guard."""

import re

import pytest

from common.constants import MEGABYTE, UPLOAD_ID_PATTERN
from uploader.exceptions import SizeExceeded
from uploader.session_id import (
    generate_random_id,
    generate_uuid_id,
    get_id_generator,
)
from uploader.size_guard import check_size, exceeds_limit


def test_random_id_matches_server_rule():
    """Random ids are 13 lowercase base-36 characters."""
    upload_id = generate_random_id()

    assert len(upload_id) == 13
    assert re.fullmatch(r'[0-9a-z]+', upload_id)
    assert re.match(UPLOAD_ID_PATTERN, upload_id)


def test_uuid_id_matches_server_rule():
    """UUID ids are 32 hex characters."""
    upload_id = generate_uuid_id()

    assert len(upload_id) == 32
    assert re.match(UPLOAD_ID_PATTERN, upload_id)


def test_ids_differ_between_calls():
    """Consecutive ids are distinct."""
    assert len({generate_random_id() for _ in range(50)}) == 50
    assert len({generate_uuid_id() for _ in range(50)}) == 50


def test_get_id_generator():
    """Strategies are looked up by name."""
    assert get_id_generator() is generate_random_id
    assert get_id_generator('uuid') is generate_uuid_id
    with pytest.raises(ValueError):
        get_id_generator('sequential')


def test_size_guard_boundary():
    """Exactly max_mb MiB is allowed; one more byte is not."""
    assert not exceeds_limit(100 * MEGABYTE, 100)
    assert exceeds_limit(100 * MEGABYTE + 1, 100)
    assert not exceeds_limit(0, 0)


def test_check_size_carries_limit():
    """SizeExceeded carries the configured limit and a display message."""
    with pytest.raises(SizeExceeded) as exc_info:
        check_size(200 * MEGABYTE, 100)

    assert exc_info.value.max_mb == 100
    assert str(exc_info.value) == "File too large (Max 100MB)"
