"""Unit tests for backoff strategies."""

import pytest

from how_cli.retry.strategies import BackoffPolicy, ExponentialBackoff


class TestExponentialBackoff:
    """Test delay sizing."""

    def test_default_timeout_delays(self):
        backoff = ExponentialBackoff()

        assert [backoff.timeout_delay(n) for n in range(4)] == [1.0, 2.0, 4.0, 8.0]

    def test_default_rate_limit_delays(self):
        backoff = ExponentialBackoff()

        assert [backoff.rate_limit_delay(n) for n in range(4)] == [2.0, 3.0, 5.0, 9.0]

    @pytest.mark.parametrize("attempt", range(6))
    def test_rate_limit_longer_than_timeout(self, attempt):
        backoff = ExponentialBackoff()

        assert backoff.rate_limit_delay(attempt) > backoff.timeout_delay(attempt)

    def test_unit_scales_both(self):
        backoff = ExponentialBackoff(unit_seconds=0.5)

        assert backoff.timeout_delay(2) == 2.0
        assert backoff.rate_limit_delay(2) == 2.5

    def test_zero_unit_means_no_wait(self):
        backoff = ExponentialBackoff(unit_seconds=0.0)

        assert backoff.timeout_delay(3) == 0.0
        assert backoff.rate_limit_delay(3) == 0.0

    def test_custom_base_and_offset(self):
        backoff = ExponentialBackoff(base=3.0, rate_limit_offset=2.0)

        assert backoff.timeout_delay(2) == 9.0
        assert backoff.rate_limit_delay(2) == 11.0

    @pytest.mark.parametrize("kwargs", [
        {"unit_seconds": -1.0},
        {"base": 0.5},
        {"rate_limit_offset": -0.1},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            ExponentialBackoff(**kwargs)

    def test_from_settings(self, test_settings):
        settings = test_settings.model_copy(update={
            "BACKOFF_UNIT_SECONDS": 0.25,
            "RETRY_BACKOFF_BASE": 4.0,
            "RATE_LIMIT_BACKOFF_OFFSET": 2.0,
        })

        backoff = ExponentialBackoff.from_settings(settings)

        assert backoff.timeout_delay(1) == 1.0
        assert backoff.rate_limit_delay(1) == 1.5

    def test_satisfies_protocol(self):
        policy: BackoffPolicy = ExponentialBackoff()

        assert policy.timeout_delay(0) == 1.0

    def test_repr(self):
        assert repr(ExponentialBackoff()) == (
            "ExponentialBackoff(unit_seconds=1.0, base=2.0, rate_limit_offset=1.0)"
        )
