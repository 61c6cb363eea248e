"""Tests for the momentum oscillators."""

import math
import random

import pytest
from domain.indicators import (
    DegenerateWindowError,
    InsufficientDataError,
    OHLCSample,
    highest,
    lowest,
    rsi,
    stochastic_oscillator,
)

REFERENCE_PRICES = [10, 12, 15, 13, 18, 10, 12, 15, 13, 18, 10, 12, 15, 13, 18]

STOCH_SIMPLE = [(15.0, 10.0, 20.0), (18.0, 13.0, 22.0)] * 7

STOCH_COMPLEX = [
    (15.0, 10.0, 20.0), (18.0, 13.0, 22.0),
    (18.0, 10.0, 19.0), (21.0, 13.0, 22.0),
    (12.0, 10.0, 32.0), (14.0, 13.0, 27.0),
] * 3


def naive_stochastic(samples, period=14):
    """Per-window rescan: seed with the current sample, then compare earlier ones."""
    result = []
    for i in range(period - 1, len(samples)):
        close, low_n, high_n = samples[i]
        for j in range(i + 1 - period, i):
            _, low, high = samples[j]
            if low_n > low:
                low_n = low
            if high_n < high:
                high_n = high
        result.append(((close - low_n) / (high_n - low_n)) * 100.0)
    return result


def random_samples(rng, n):
    samples = []
    price = 100.0
    for _ in range(n):
        price = max(1.0, price + rng.uniform(-3, 3))
        low = price - rng.uniform(0.1, 4)
        high = price + rng.uniform(0.1, 4)
        close = rng.uniform(low, high)
        samples.append((close, low, high))
    return samples


class TestRSI:
    """Test RSI indicator."""

    def test_rsi_single_window(self):
        # WHY: exactly period + 1 prices use only the initial-average formula
        result = rsi(REFERENCE_PRICES)
        assert result == pytest.approx([57.69231], rel=1e-4)

    def test_rsi_first_recurrence(self):
        result = rsi(REFERENCE_PRICES + [10])
        assert result == pytest.approx([57.69231, 49.492382], rel=1e-4)

    def test_rsi_reference_vector(self):
        prices = [5, 10, 11, 6, 5, 42, 33, 1] * 3
        result = rsi(prices)
        expected = [59.210526, 48.267326, 49.52316, 51.120464, 51.451355,
                    49.641834, 49.268627, 60.9628, 57.491276, 47.199604]
        assert result == pytest.approx(expected, rel=1e-4)

    def test_rsi_length(self):
        for n in (15, 16, 30, 100):
            prices = [100 + math.sin(i) * 5 for i in range(n)]
            assert len(rsi(prices)) == n - 14
        assert len(rsi(list(range(10)) + [3, 1], period=3)) == 9

    def test_rsi_empty(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            rsi([])
        assert exc_info.value.received == 0
        assert exc_info.value.required == 15
        assert str(exc_info.value) == (
            "Not enough entries to calculate the RSI. Received 0, but required 15."
        )

    def test_rsi_one_short(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            rsi(REFERENCE_PRICES[:-1])
        assert exc_info.value.received == 14

    def test_rsi_custom_period_required(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            rsi([1, 2, 3], period=5)
        assert exc_info.value.required == 6

    @pytest.mark.parametrize("period", [0, -1, 2.5, True])
    def test_rsi_invalid_period(self, period):
        with pytest.raises(ValueError):
            rsi(REFERENCE_PRICES, period=period)

    def test_rsi_accepts_integer_like_period(self):
        class Period:
            def __index__(self):
                return 14

        assert rsi(REFERENCE_PRICES, period=Period()) == rsi(REFERENCE_PRICES)

    def test_rsi_zero_change_keeps_ratio(self):
        # WHY: a zero change decays both averages by the same factor
        result = rsi(REFERENCE_PRICES + [18])
        assert result[1] == pytest.approx(result[0])

    def test_rsi_all_gains_saturates(self):
        result = rsi(list(range(1, 20)))
        assert result == [100.0] * 5

    def test_rsi_all_losses_is_zero(self):
        result = rsi(list(range(20, 1, -1)))
        assert all(v == pytest.approx(0.0) for v in result)

    def test_rsi_flat_is_nan(self):
        result = rsi([5.0] * 16)
        assert len(result) == 2
        assert all(math.isnan(v) for v in result)

    def test_rsi_strict_raises_on_zero_loss(self):
        with pytest.raises(DegenerateWindowError) as exc_info:
            rsi(list(range(1, 20)), strict=True)
        assert exc_info.value.index == 0

    def test_rsi_strict_matches_default(self):
        prices = REFERENCE_PRICES + [10, 11, 9]
        assert rsi(prices, strict=True) == rsi(prices)

    def test_rsi_bounds(self):
        rng = random.Random(7)
        prices = [s[0] for s in random_samples(rng, 300)]
        result = rsi(prices)
        assert all(0 <= v <= 100 for v in result)

    def test_rsi_input_unchanged(self):
        prices = REFERENCE_PRICES + [10]
        copy = list(prices)
        rsi(prices)
        assert prices == copy

    def test_rsi_accepts_tuple(self):
        assert rsi(tuple(REFERENCE_PRICES)) == rsi(REFERENCE_PRICES)


class TestStochastic:
    """Test Stochastic Oscillator."""

    def test_stochastic_simple(self):
        assert stochastic_oscillator(STOCH_SIMPLE) == pytest.approx([66.66667], rel=1e-4)

    def test_stochastic_reference_vector(self):
        result = stochastic_oscillator(STOCH_COMPLEX)
        expected = [36.363636, 36.363636, 50.0, 9.090909, 18.181818]
        assert result == pytest.approx(expected, rel=1e-4)

    def test_stochastic_named_samples(self):
        samples = [OHLCSample(*s) for s in STOCH_COMPLEX]
        assert stochastic_oscillator(samples) == stochastic_oscillator(STOCH_COMPLEX)

    def test_stochastic_length(self):
        rng = random.Random(1)
        for n in (14, 15, 40):
            assert len(stochastic_oscillator(random_samples(rng, n))) == n - 13
        assert len(stochastic_oscillator(STOCH_COMPLEX, period=1)) == len(STOCH_COMPLEX)

    def test_stochastic_single_sample(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            stochastic_oscillator([(10.0, 10.0, 10.0)])
        assert exc_info.value.received == 1
        assert exc_info.value.required == 14
        assert str(exc_info.value) == (
            "Not enough entries to calculate stochastic oscillator. "
            "Received 1, but required 14."
        )

    def test_stochastic_invalid_period(self):
        with pytest.raises(ValueError):
            stochastic_oscillator(STOCH_SIMPLE, period=0)

    def test_stochastic_flat_window(self):
        result = stochastic_oscillator([(10.0, 10.0, 10.0)] * 14)
        assert len(result) == 1
        assert math.isnan(result[0])

    def test_stochastic_flat_window_close_outside(self):
        result = stochastic_oscillator([(12.0, 10.0, 10.0)] * 14)
        assert result == [math.inf]

    def test_stochastic_strict(self):
        samples = STOCH_SIMPLE + [(10.0, 10.0, 10.0)] * 14
        with pytest.raises(DegenerateWindowError) as exc_info:
            stochastic_oscillator(samples, strict=True)
        assert exc_info.value.index == 14

    def test_stochastic_bounds(self):
        rng = random.Random(3)
        result = stochastic_oscillator(random_samples(rng, 200))
        assert all(0 <= v <= 100 for v in result)

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("period", [1, 2, 5, 14, 30])
    def test_matches_naive_rescan(self, seed, period):
        rng = random.Random(seed)
        samples = random_samples(rng, 120)
        fast = stochastic_oscillator(samples, period)
        assert fast == pytest.approx(naive_stochastic(samples, period), abs=1e-4)

    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("period", [1, 2, 5, 14])
    def test_matches_naive_rescan_with_gaps(self, seed, period):
        rng = random.Random(100 + seed)
        samples = []
        for close, low, high in random_samples(rng, 80):
            if rng.random() < 0.15:
                low = math.nan
            if rng.random() < 0.15:
                high = math.nan
            samples.append((close, low, high))
        fast = stochastic_oscillator(samples, period)
        expected = naive_stochastic(samples, period)
        assert fast == pytest.approx(expected, abs=1e-4, nan_ok=True)

    def test_nan_low_earlier_in_window_is_skipped(self):
        samples = [(7.0, math.nan, 9.0), (6.0, 5.0, 8.0), (7.0, 6.0, 9.0)]
        assert stochastic_oscillator(samples, 3) == [50.0]

    def test_nan_low_on_current_sample(self):
        samples = [(6.0, 5.0, 8.0), (7.0, 6.0, 9.0), (7.0, math.nan, 9.0)]
        result = stochastic_oscillator(samples, 3)
        assert len(result) == 1
        assert math.isnan(result[0])


class TestWindows:
    """Test rolling extremes."""

    def test_highest(self):
        assert highest([10, 12, 11, 15, 14, 13], 3) == [12, 15, 15, 15]

    def test_lowest(self):
        assert lowest([10, 12, 11, 15, 14, 13], 3) == [10, 11, 11, 13]

    def test_shorter_than_period(self):
        assert highest([1, 2], 3) == []
        assert lowest([], 3) == []

    def test_period_one_is_identity(self):
        values = [3, 1, 4, 1, 5, 9, 2, 6]
        assert highest(values, 1) == values
        assert lowest(values, 1) == values

    def test_ties(self):
        assert highest([5, 5, 5, 4], 2) == [5, 5, 5]
        assert lowest([5, 5, 5, 6], 2) == [5, 5, 5]

    def test_nan_ignored_inside_window(self):
        nan = math.nan
        assert highest([nan, 3, 1, 2], 2) == [3, 3, 2]
        assert lowest([4, nan, 1, 3, 2], 3) == [1, 1, 1]

    def test_nan_in_last_slot(self):
        result = lowest([1, 2, math.nan], 3)
        assert len(result) == 1
        assert math.isnan(result[0])

    def test_integer_like_period(self):
        class Period:
            def __index__(self):
                return 3

        assert highest([10, 12, 11, 15, 14, 13], Period()) == [12, 15, 15, 15]

    def test_random_against_slices(self):
        rng = random.Random(11)
        values = [rng.uniform(-50, 50) for _ in range(200)]
        for period in (1, 3, 14, 60):
            windows = [values[i - period + 1:i + 1] for i in range(period - 1, len(values))]
            assert highest(values, period) == [max(w) for w in windows]
            assert lowest(values, period) == [min(w) for w in windows]
