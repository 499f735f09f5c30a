"""Shared fixtures — every test starts without a process-wide router."""

from collections.abc import Iterator

import pytest

from signpost.routing.router import unset_instance


@pytest.fixture(autouse=True)
def _fresh_router() -> Iterator[None]:
    unset_instance()
    yield
    unset_instance()
