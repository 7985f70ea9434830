from __future__ import annotations

import pytest

from pontifex import encoding

IDENTITY_CODE = encoding.deck_to_code(range(1, encoding.DECK_CARD_COUNT + 1))


@pytest.fixture
def identity_code() -> str:
    return IDENTITY_CODE
