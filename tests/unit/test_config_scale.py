"""Tests for EngineConfig and default-scale handling."""

import threading

import pytest

from bcmath.config import DEFAULT_ENGINE_CONFIG, MAX_SCALE, EngineConfig
from bcmath.errors import InvalidScale
from bcmath.scale import ScaleState, resolve_scale, validate_precision, validate_scale


class TestEngineConfig:
    """Tests for EngineConfig defaults and environment loading."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.default_scale == 0
        assert config.strict is True
        assert config.float_rounding_parity is False
        assert config.max_power_bits == 2**26
        assert config.max_sqrt_scale == 100_000
        assert config.max_round_precision == 100_000
        assert DEFAULT_ENGINE_CONFIG == config

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_ENGINE_CONFIG.default_scale = 5

    def test_from_empty_env(self):
        assert EngineConfig.from_env({}) == EngineConfig()

    def test_from_env(self):
        config = EngineConfig.from_env(
            {
                "BCMATH_SCALE": "4",
                "BCMATH_STRICT": "false",
                "BCMATH_FLOAT_ROUNDING": "yes",
                "BCMATH_MAX_POWER_BITS": "1024",
                "BCMATH_MAX_SQRT_SCALE": "50",
                "BCMATH_MAX_ROUND_PRECISION": "25",
            }
        )
        assert config == EngineConfig(
            default_scale=4,
            strict=False,
            float_rounding_parity=True,
            max_power_bits=1024,
            max_sqrt_scale=50,
            max_round_precision=25,
        )

    @pytest.mark.parametrize(
        "raw,expected",
        [("-3", 0), ("abc", 0), ("", 0), (" 7 ", 7), (str(2**40), MAX_SCALE)],
    )
    def test_scale_clamped(self, raw, expected):
        assert EngineConfig.from_env({"BCMATH_SCALE": raw}).default_scale == expected

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("BCMATH_SCALE", "2")
        assert EngineConfig.from_env().default_scale == 2


class TestValidateScale:
    @pytest.mark.parametrize("scale", [0, 1, MAX_SCALE])
    def test_accepted(self, scale):
        assert validate_scale(scale) == scale

    @pytest.mark.parametrize("scale", [-1, MAX_SCALE + 1])
    def test_rejected(self, scale):
        with pytest.raises(InvalidScale) as exc_info:
            validate_scale(scale, "add", 3)
        assert str(exc_info.value) == (
            "bcadd(): Argument #3 ($scale) must be between 0 and 2147483647"
        )

    def test_invalid_scale_is_value_error(self):
        with pytest.raises(ValueError):
            validate_scale(-5, "scale", 1)


class TestValidatePrecision:
    def test_negative_allowed(self):
        assert validate_precision(-MAX_SCALE) == -MAX_SCALE

    def test_out_of_range(self):
        with pytest.raises(InvalidScale, match=r"bcround\(\): Argument #2 \(\$precision\)"):
            validate_precision(MAX_SCALE + 1)


class TestScaleState:
    """Tests for the lock-guarded default scale."""

    def test_lazy_fallback(self):
        state = ScaleState(3)
        assert state.get() == 3

    def test_set_returns_previous(self):
        state = ScaleState(2)
        assert state.set(5) == 2
        assert state.set(7) == 5
        assert state.get() == 7

    def test_reset(self):
        state = ScaleState(1)
        state.set(9)
        state.reset()
        assert state.get() == 1

    def test_resolve(self):
        state = ScaleState(4)
        assert resolve_scale(None, state) == 4
        assert resolve_scale(0, state) == 0

    def test_concurrent_sets(self):
        """Concurrent writers leave one of the written values."""
        state = ScaleState(0)
        threads = [threading.Thread(target=state.set, args=(i,)) for i in range(1, 21)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert 1 <= state.get() <= 20
