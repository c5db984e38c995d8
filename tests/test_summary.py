"""Tests for the boost converter design equations."""

import math

import pytest

from smps_tools import (
    RESULT_KEYS,
    BoostSummary,
    ConverterParams,
    UnsupportedTopologyError,
    ValidationError,
    compute_summary,
    derive_summary,
    make_boost_config,
)


class TestReferenceDesign:
    """5V -> 12V, 1A, 100kHz, 10uH, 100mV ripple, no ESR, no explicit duty cycle."""

    def test_recovers_configured_vout(self, boost_params):
        summary = derive_summary(boost_params)
        assert summary.vout == pytest.approx(12.0)

    def test_duty_cycle(self, boost_params):
        summary = derive_summary(boost_params)
        assert summary.duty_cycle == pytest.approx(7 / 12)

    def test_inductor_currents(self, boost_params):
        summary = derive_summary(boost_params)
        assert summary.il_rpl == pytest.approx(2.916667, rel=1e-6)
        assert summary.iout_rpl == pytest.approx(2.4)
        assert summary.il_pk == pytest.approx(3.858333, rel=1e-6)
        assert summary.il_rms == pytest.approx(math.sqrt(2.4**2 + 2.916667**2 / 12), rel=1e-6)

    def test_nominal_values(self, boost_params):
        summary = derive_summary(boost_params)
        assert summary.iin_nom == pytest.approx(2.4)
        assert summary.iin_rpl_nom == pytest.approx(2.916667, rel=1e-6)
        assert summary.lmin_nom == pytest.approx(6.0764e-6, rel=1e-4)

    def test_ccm_and_component_minimums(self, boost_params):
        summary = derive_summary(boost_params)
        assert summary.iout_min == pytest.approx(0.607639, rel=1e-5)
        assert summary.lmin == pytest.approx(summary.lmin_nom)
        assert summary.cin_min == pytest.approx(36.458e-6, rel=1e-4)
        assert summary.cout_min == pytest.approx(58.333e-6, rel=1e-4)

    def test_no_esr(self, boost_params):
        summary = derive_summary(boost_params)
        assert summary.vin_esr == 0
        assert summary.vout_esr == 0


class TestEsr:
    """Tests for ESR-induced ripple."""

    def test_input_esr(self, boost_params):
        summary = derive_summary(boost_params, rin_esr=0.02)
        assert summary.vin_esr == pytest.approx(summary.il_rpl * 0.02)
        assert summary.vout_esr == 0

    def test_output_esr(self, boost_params):
        summary = derive_summary(boost_params, rout_esr=0.05)
        expected = (summary.iout_rpl + summary.il_rpl / 2) * 0.05
        assert summary.vout_esr == pytest.approx(expected)
        assert summary.vout_esr == pytest.approx(0.192917, rel=1e-5)
        assert summary.vin_esr == 0

    def test_esr_does_not_change_other_results(self, boost_params):
        plain = derive_summary(boost_params).to_dict()
        with_esr = derive_summary(boost_params, rin_esr=0.1, rout_esr=0.1).to_dict()
        for key in RESULT_KEYS:
            if key not in ("Vin_esr", "Vout_esr"):
                assert with_esr[key] == plain[key]


class TestDutyCycleOverride:
    """Tests for an explicit duty cycle."""

    @pytest.mark.parametrize("dt", [0.0, 0.25, 0.5, 0.6, 0.9])
    def test_vout_follows_duty_cycle(self, boost_params, dt):
        summary = derive_summary(boost_params, dt=dt)
        assert summary.vout == pytest.approx(boost_params.vin / (1 - dt))
        assert summary.duty_cycle == pytest.approx(dt)

    def test_half_duty(self, boost_params):
        summary = derive_summary(boost_params, dt=0.5)
        assert summary.vout == pytest.approx(10.0)
        assert summary.il_rpl == pytest.approx(2.5)
        assert summary.iout_rpl == pytest.approx(2.0)
        assert summary.il_pk == pytest.approx(3.25)
        assert summary.lmin == pytest.approx(6.25e-6)

    def test_nominal_values_ignore_duty_cycle(self, boost_params):
        plain = derive_summary(boost_params)
        overridden = derive_summary(boost_params, dt=0.5)
        assert overridden.iin_nom == plain.iin_nom
        assert overridden.iin_rpl_nom == plain.iin_rpl_nom
        assert overridden.lmin_nom == plain.lmin_nom

    def test_independent_of_configured_vout(self):
        a = derive_summary(make_boost_config(5, 12, 1, 100e3, 10e-6, 0.1, 0.1), dt=0.6)
        b = derive_summary(make_boost_config(5, 24, 1, 100e3, 10e-6, 0.1, 0.1), dt=0.6)
        assert a.vout == pytest.approx(b.vout)
        assert a.il_pk == pytest.approx(b.il_pk)


class TestProperties:
    """Invariants over the derived results."""

    def test_deterministic(self, boost_params):
        first = derive_summary(boost_params, 0.01, 0.02, 0.55).to_dict()
        second = derive_summary(boost_params, 0.01, 0.02, 0.55).to_dict()
        assert first == second

    @pytest.mark.parametrize(
        "inputs",
        [
            (5, 12, 1, 100e3, 10e-6, 0.1, 0.1),
            (3.3, 5, 0.5, 1e6, 2.2e-6, 0.05, 0.02),
            (12, 48, 2, 250e3, 47e-6, 0.2, 0.5),
            (1.2, 3.3, 0.1, 500e3, 4.7e-6, 0.01, 0.01),
        ],
    )
    def test_non_negative_for_valid_inputs(self, inputs):
        summary = derive_summary(make_boost_config(*inputs))
        for value in (
            summary.il_rpl,
            summary.il_pk,
            summary.il_rms,
            summary.iout_rpl,
            summary.cin_min,
            summary.cout_min,
            summary.lmin,
            summary.lmin_nom,
        ):
            assert value >= 0

    def test_peak_exceeds_rms(self, boost_params):
        summary = derive_summary(boost_params)
        assert summary.il_pk >= summary.il_rms

    def test_config_not_mutated(self, boost_params):
        before = boost_params.to_dict()
        derive_summary(boost_params, 0.1, 0.1, 0.7)
        assert boost_params.to_dict() == before


class TestResultsRecord:
    """Tests for BoostSummary."""

    def test_to_dict_keys(self, boost_params):
        assert tuple(derive_summary(boost_params).to_dict()) == (
            "Iin_nom",
            "Iin_rpl_nom",
            "Lmin_nom",
            "Vout",
            "Iout_min",
            "Iout_rpl",
            "Il_pk",
            "Il_rpl",
            "Il_rms",
            "Lmin",
            "Cin_min",
            "Vin_esr",
            "Cout_min",
            "Vout_esr",
        )

    def test_to_dict_values(self, boost_params):
        summary = derive_summary(boost_params)
        data = summary.to_dict()
        assert data["Il_pk"] == summary.il_pk
        assert data["Vout"] == summary.vout
        assert data["Cout_min"] == summary.cout_min

    def test_units(self):
        units = BoostSummary.units()
        assert units["Lmin"] == "H"
        assert units["Cin_min"] == "F"
        assert units["Il_rms"] == "A"
        assert units["Vout_esr"] == "V"

    def test_carries_inputs(self, boost_params):
        summary = derive_summary(boost_params, rin_esr=0.01, rout_esr=0.02)
        assert summary.params is boost_params
        assert summary.rin_esr == 0.01
        assert summary.rout_esr == 0.02


class TestTopologyDispatch:
    """Tests for unsupported topologies."""

    def _buck(self):
        return ConverterParams("buck", 12, 5, 1, 100e3, 10e-6, 0.1, 0.1)

    def test_derive_raises(self):
        with pytest.raises(UnsupportedTopologyError) as exc_info:
            derive_summary(self._buck())
        assert exc_info.value.topology == "buck"
        assert "Invalid SMPS topology" in str(exc_info.value)

    def test_compute_returns_no_results(self):
        summary, text = compute_summary(self._buck())
        assert summary is None
        assert text == "Invalid SMPS topology: buck\n"

    def test_compute_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="smps_tools"):
            compute_summary(self._buck())
        assert "Invalid SMPS topology: buck" in caplog.text

    def test_string_topology_accepted(self):
        params = ConverterParams("Boost", 5, 12, 1, 100e3, 10e-6, 0.1, 0.1)
        summary, _ = compute_summary(params)
        assert summary is not None
        assert summary.il_pk == pytest.approx(3.858333, rel=1e-6)


class TestComputeSummary:
    """Tests for the compute_summary wrapper."""

    def test_returns_results_and_report(self, boost_params):
        summary, text = compute_summary(boost_params)
        assert isinstance(summary, BoostSummary)
        assert text.startswith("Step-up (Boost) Converter Summary\n")

    def test_silent_by_default(self, boost_params, capsys):
        compute_summary(boost_params)
        assert capsys.readouterr().out == ""

    def test_echo(self, boost_params, capsys):
        _, text = compute_summary(boost_params, echo=True)
        assert capsys.readouterr().out == text

    def test_echo_diagnostic(self, capsys):
        params = ConverterParams("flyback", 12, 5, 1, 100e3, 10e-6, 0.1, 0.1)
        compute_summary(params, echo=True)
        assert "Invalid SMPS topology: flyback" in capsys.readouterr().out

    def test_legacy_mode_computes_implausible_inputs(self):
        """Vout < Vin is evaluated without complaint unless validation is requested."""
        summary, _ = compute_summary(make_boost_config(12, 5, 1, 100e3, 10e-6, 0.1, 0.1))
        assert summary.lmin_nom < 0

    def test_legacy_mode_zero_frequency(self):
        with pytest.raises(ZeroDivisionError):
            compute_summary(make_boost_config(5, 12, 1, 0, 10e-6, 0.1, 0.1))

    def test_validate_rejects_implausible_inputs(self):
        with pytest.raises(ValidationError) as exc_info:
            compute_summary(make_boost_config(12, 5, 1, 100e3, 10e-6, 0.1, 0.1), validate=True)
        assert any("greater than Vin" in e for e in exc_info.value.errors)

    def test_validate_accepts_valid_inputs(self, boost_params):
        summary, _ = compute_summary(boost_params, 0.02, 0.05, 0.6, validate=True)
        assert summary.vout == pytest.approx(12.5)
