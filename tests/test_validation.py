"""Tests for parameter plausibility checks."""

import pytest

from smps_tools import ConverterParams, ValidationError, check_params, make_boost_config
from smps_tools.validation import validate_params


class TestValidateParams:
    """Tests for validate_params."""

    def test_valid(self, boost_params):
        assert validate_params(boost_params) == []
        assert validate_params(boost_params, 0.02, 0.05, 0.6) == []

    @pytest.mark.parametrize(
        "index, symbol",
        [
            (0, "Vin"),
            (2, "Iout"),
            (3, "freq"),
            (4, "L"),
            (5, "Vin_rpl"),
            (6, "Vout_rpl"),
        ],
    )
    def test_non_positive_inputs(self, index, symbol):
        inputs = [5.0, 12.0, 1.0, 100e3, 10e-6, 0.1, 0.1]
        inputs[index] = 0.0
        errors = validate_params(make_boost_config(*inputs))
        assert any(e.startswith(f"{symbol} must be > 0") for e in errors)

    def test_vout_not_above_vin(self):
        errors = validate_params(make_boost_config(12, 5, 1, 100e3, 10e-6, 0.1, 0.1))
        assert errors == ["Vout must be greater than Vin for a boost converter (Vin=12, Vout=5)"]

    def test_vout_equal_vin(self):
        errors = validate_params(make_boost_config(5, 5, 1, 100e3, 10e-6, 0.1, 0.1))
        assert len(errors) == 1

    def test_negative_esr(self, boost_params):
        errors = validate_params(boost_params, rin_esr=-0.1, rout_esr=-0.2)
        assert "Rin_esr must be >= 0 Ω (got -0.1)" in errors
        assert "Rout_esr must be >= 0 Ω (got -0.2)" in errors

    @pytest.mark.parametrize("dt", [-0.1, 1.0, 1.5])
    def test_duty_cycle_out_of_range(self, boost_params, dt):
        errors = validate_params(boost_params, dt=dt)
        assert errors == [f"Duty cycle must be in [0, 1) (got {dt})"]

    def test_zero_duty_cycle_allowed(self, boost_params):
        assert validate_params(boost_params, dt=0.0) == []

    def test_unsupported_topology(self):
        errors = validate_params(ConverterParams("buck", 12, 5, 1, 100e3, 10e-6, 0.1, 0.1))
        assert errors == ["Unsupported topology 'buck' (supported: boost)"]

    def test_collects_all_errors(self):
        errors = validate_params(make_boost_config(0, 0, 0, 0, 0, 0, 0), -1, -1, 2)
        assert len(errors) == 10


class TestCheckParams:
    """Tests for check_params."""

    def test_passes(self, boost_params):
        check_params(boost_params)

    def test_raises_with_all_errors(self):
        with pytest.raises(ValidationError) as exc_info:
            check_params(make_boost_config(-5, 12, 1, 100e3, 10e-6, 0.1, 0.1), dt=1.0)
        err = exc_info.value
        assert len(err.errors) == 2
        assert err.context == {"topology": "boost"}
        assert "Validation failed with 2 error(s)" in str(err)
        assert "--no-validate" in str(err)
