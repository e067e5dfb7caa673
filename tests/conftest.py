"""Shared test fixtures for the exchange view pipeline."""

import pytest

from factories import TOKEN0_ADDRESS, TOKEN1_ADDRESS

from dexview.config import ViewSettings
from dexview.models import Token, TokenPair


@pytest.fixture
def token0() -> Token:
    """Base token (DApp)."""
    return Token(address=TOKEN0_ADDRESS, symbol="DAPP")


@pytest.fixture
def token1() -> Token:
    """Quote token (mETH)."""
    return Token(address=TOKEN1_ADDRESS, symbol="mETH")


@pytest.fixture
def pair(token0: Token, token1: Token) -> TokenPair:
    """DAPP priced in mETH."""
    return TokenPair(token0=token0, token1=token1)


@pytest.fixture
def view_settings() -> ViewSettings:
    """Default view settings (5 decimal prices, hourly UTC candles)."""
    return ViewSettings()
