"""Tests for the additive lagged Fibonacci engine."""

from __future__ import annotations

import pytest

from core.errors import InvalidParameterError
from generators.alf import ALFGenerator
from generators.mt19937 import MT19937Generator


class TestALFRecurrence:
    """The stream should follow x[j] = x[j - short] + x[j - long] mod 2**32."""

    def test_first_block_matches_recurrence(self) -> None:
        short, long_ = 5, 17
        seeder = MT19937Generator(seed=42)
        history = [seeder.next_uint() for _ in range(long_)]

        gen = ALFGenerator(seed=42, short_lag=short, long_lag=long_)
        for _ in range(3 * long_):
            expected = (history[-short] + history[-long_]) & 0xFFFFFFFF
            assert gen.next_uint() == expected
            history.append(expected)

    def test_default_lags(self) -> None:
        gen = ALFGenerator(seed=1)
        assert gen.short_lag == 418
        assert gen.long_lag == 1279


class TestALFLags:
    """Tests for lag validation."""

    def test_invalid_short_lag(self) -> None:
        with pytest.raises(InvalidParameterError):
            ALFGenerator(seed=1, short_lag=0)

    def test_long_lag_must_exceed_short(self) -> None:
        with pytest.raises(InvalidParameterError):
            ALFGenerator(seed=1, short_lag=10, long_lag=10)

    def test_validators(self) -> None:
        gen = ALFGenerator(seed=1)
        assert ALFGenerator.is_valid_short_lag(1)
        assert not ALFGenerator.is_valid_short_lag(0)
        assert gen.is_valid_long_lag(419)
        assert not gen.is_valid_long_lag(418)

    def test_short_lag_setter(self) -> None:
        gen = ALFGenerator(seed=1)
        gen.short_lag = 24
        assert gen.short_lag == 24
        with pytest.raises(InvalidParameterError):
            gen.short_lag = 1279

    def test_short_lag_setter_resets(self) -> None:
        gen = ALFGenerator(seed=7, short_lag=5, long_lag=17)
        gen.next_uint()
        gen.short_lag = 3
        fresh = ALFGenerator(seed=7, short_lag=3, long_lag=17)
        assert [gen.next_uint() for _ in range(50)] == [fresh.next_uint() for _ in range(50)]

    def test_long_lag_setter_resets(self) -> None:
        gen = ALFGenerator(seed=7, short_lag=5, long_lag=17)
        gen.long_lag = 31
        fresh = ALFGenerator(seed=7, short_lag=5, long_lag=31)
        assert [gen.next_uint() for _ in range(50)] == [fresh.next_uint() for _ in range(50)]

    def test_long_lag_setter_rejects(self) -> None:
        gen = ALFGenerator(seed=7, short_lag=5, long_lag=17)
        with pytest.raises(InvalidParameterError):
            gen.long_lag = 5
