"""Pytest configuration and fixtures."""

import pytest

from config.settings import Settings
from src.core.constants import WAD
from src.core.models import MarketParams, MarketState
from src.data.storage import InMemoryRateStore
from src.irm import DynamicRate

CONTROLLER = "1DrDyTr9RpRsQnDnXo2YRiPzPW4ooHX5LLoqXrqfMrpQH"
OUTSIDER = "1BmVCLrjttchZMW7i6df7mTdCKzHpy38bgDbVL1GqV6P7"
START_TIME = 1_700_000_000


class FakeClock:
    """Controllable replacement for the wall clock."""

    def __init__(self, now: int = START_TIME):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


def make_state(
    supply: int = 100 * WAD,
    borrow: int = 50 * WAD,
    last_update: int = START_TIME,
) -> MarketState:
    """Create market totals with shares equal to assets."""
    return MarketState(
        total_supply_assets=supply,
        total_supply_shares=supply,
        total_borrow_assets=borrow,
        total_borrow_shares=borrow,
        last_update=last_update,
        fee=0,
    )


@pytest.fixture
def market_params() -> MarketParams:
    """Create sample market parameters."""
    return MarketParams(
        loan_token="aa" * 32,
        collateral_token="bb" * 32,
        oracle="cc" * 32,
        interest_rate_model="dd" * 32,
        loan_to_value=75 * 10**16,  # 75% LTV
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryRateStore:
    return InMemoryRateStore()


@pytest.fixture
def dynamic_rate(store, clock) -> DynamicRate:
    """Create an adaptive rate model controlled by CONTROLLER."""
    return DynamicRate(controller=CONTROLLER, store=store, clock=clock)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Create settings isolated from the environment file."""
    return Settings(
        _env_file=None,
        controller_address=CONTROLLER,
        fixed_rate_admin=CONTROLLER,
        store_dir=tmp_path / "irm",
    )
