"""Integration tests for the adaptive rate model over a disk store."""

import pytest

from src.core.constants import SECONDS_PER_DAY, SECONDS_PER_YEAR, WAD
from src.irm import DEFAULT_CURVE_PARAMS, AdaptiveCurve, DynamicRate

from conftest import CONTROLLER, FakeClock, START_TIME, make_state


class TestDynamicRateFlow:
    """End-to-end market lifecycle with a persistent store."""

    @pytest.fixture
    def settings(self, test_settings):
        return test_settings.model_copy(update={"store_backend": "disk"})

    @pytest.fixture
    def clock(self):
        return FakeClock(START_TIME + SECONDS_PER_YEAR)

    @pytest.fixture
    def model(self, settings, clock):
        model = DynamicRate.from_settings(settings, clock=clock)
        yield model
        model.store.close()

    def test_market_lifecycle(self, model, market_params, clock):
        """Bootstrap, update, then quote at several utilizations."""
        state = make_state(supply=3 * WAD, borrow=15 * 10**17, last_update=clock.now)
        curve = AdaptiveCurve(DEFAULT_CURVE_PARAMS)

        assert model.init_interest(market_params, state) is True
        model.update(market_params, state, caller=CONTROLLER)
        rate_at_target = model.rate_at_target(market_params)
        assert rate_at_target == DEFAULT_CURVE_PARAMS.initial_rate_at_target

        quotes = {}
        for borrow in (0, 15 * 10**17, 27 * 10**17, 285 * 10**16, 45 * 10**17):
            quoted_state = make_state(supply=3 * WAD, borrow=borrow, last_update=clock.now)
            expected = curve.borrow_rate(quoted_state.utilization, 0, rate_at_target).avg_rate

            quotes[borrow] = model.quote(market_params, quoted_state)
            assert quotes[borrow] == expected

        assert quotes[27 * 10**17] == rate_at_target  # at target
        assert quotes[0] < quotes[15 * 10**17] < quotes[27 * 10**17]
        assert quotes[27 * 10**17] < quotes[285 * 10**16] < quotes[45 * 10**17]

    def test_time_dependent_adaptation(self, model, market_params, clock):
        """Older last updates move the rate further from the target rate."""
        model.init_interest(market_params, make_state())

        high_old = model.quote(market_params, make_state(supply=3 * WAD, borrow=285 * 10**16))
        high_recent = model.quote(
            market_params,
            make_state(supply=3 * WAD, borrow=285 * 10**16, last_update=clock.now - SECONDS_PER_DAY),
        )
        assert high_old >= high_recent

        low_old = model.quote(market_params, make_state(supply=3 * WAD, borrow=15 * 10**17))
        low_recent = model.quote(
            market_params,
            make_state(supply=3 * WAD, borrow=15 * 10**17, last_update=clock.now - SECONDS_PER_DAY),
        )
        assert low_old <= low_recent

    def test_rate_at_target_survives_restart(self, settings, market_params, clock):
        first = DynamicRate.from_settings(settings, clock=clock)
        first.init_interest(market_params, make_state())
        first.update(
            market_params,
            make_state(borrow=95 * WAD, last_update=clock.now - SECONDS_PER_DAY),
            caller=CONTROLLER,
        )
        adapted = first.rate_at_target(market_params)
        first.store.close()

        second = DynamicRate.from_settings(settings, clock=clock)
        try:
            assert second.rate_at_target(market_params) == adapted
            assert second.init_interest(market_params, make_state()) is False
            state = make_state(borrow=90 * WAD, last_update=clock.now)
            assert second.quote(market_params, state) == adapted
        finally:
            second.store.close()

    def test_repeated_updates_track_utilization(self, model, market_params, clock):
        """A market held above target keeps raising its rate at target."""
        model.init_interest(market_params, make_state())
        history = [model.rate_at_target(market_params)]

        for _ in range(4):
            last_update = clock.now
            clock.advance(SECONDS_PER_DAY)
            model.update(market_params, make_state(borrow=95 * WAD, last_update=last_update), caller=CONTROLLER)
            history.append(model.rate_at_target(market_params))

        assert all(a < b for a, b in zip(history, history[1:]))
        assert [e.rate_at_target for e in model.events] == history[1:]
