"""Shared test fixtures for seqcheck."""

import random
import string
from collections.abc import Callable, Iterable, Iterator

import pytest

_ALPHANUMERIC = string.ascii_letters + string.digits


@pytest.fixture
def any_string() -> Callable[[], str]:
    """Return a factory for random alphanumeric strings of 10-20 characters.

    Every string starts with a letter, so upper- and lower-case variants
    always differ.
    """

    def _make() -> str:
        length = random.randint(10, 20)
        chars = random.choices(_ALPHANUMERIC, k=length - 1)
        return random.choice(string.ascii_letters) + "".join(chars)

    return _make


@pytest.fixture
def one_shot() -> Callable[[Iterable], Iterator]:
    """Return a factory turning items into a generator (single-use iterable)."""

    def _make(items: Iterable) -> Iterator:
        return (item for item in items)

    return _make
