from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from localdate.config import OVERFLOW_POLICY_ENV, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(OVERFLOW_POLICY_ENV, raising=False)
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()
