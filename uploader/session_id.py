"""Upload id generation."""

import random
import string
import uuid
from typing import Callable

from common.constants import UPLOAD_ID_LENGTH

BASE36_ALPHABET = string.digits + string.ascii_lowercase

IdGenerator = Callable[[], str]


def generate_random_id(length: int = UPLOAD_ID_LENGTH) -> str:
    """
    Generate a short base-36 token from the non-cryptographic ``random`` module.

    Only meant to tell concurrent attempts apart on the server.

    Args:
        length: Number of characters

    Returns:
        Lowercase alphanumeric token
    """
    return ''.join(random.choices(BASE36_ALPHABET, k=length))


def generate_uuid_id() -> str:
    """
    Generate a UUID4 hex token (32 alphanumeric characters).

    Returns:
        UUID4 hex string
    """
    return uuid.uuid4().hex


ID_STRATEGIES: dict[str, IdGenerator] = {
    'random': generate_random_id,
    'uuid': generate_uuid_id,
}


def get_id_generator(strategy: str = 'random') -> IdGenerator:
    """
    Look up an id generator by strategy name.

    Raises:
        ValueError: If the strategy is unknown
    """
    try:
        return ID_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown upload id strategy: {strategy!r} (expected one of {', '.join(ID_STRATEGIES)})"
        )
