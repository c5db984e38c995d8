"""Pytest fixtures for smps-tools tests."""

from pathlib import Path

import pytest

from smps_tools import make_boost_config
from smps_tools.log import disable_verbose

# 5V -> 12V at 1A, 100kHz, 10uH, 100mV ripple on both sides
REFERENCE_INPUTS = (5.0, 12.0, 1.0, 100e3, 10e-6, 0.1, 0.1)

REFERENCE_DESIGN = """\
name: 5V to 12V boost
topology: boost
input:
  voltage: 5V
  ripple: 100mV
output:
  voltage: 12V
  current: 1A
  ripple: 100mV
switching:
  frequency: 100kHz
inductor:
  inductance: 10uH
capacitors:
  input_esr: 20mΩ
  output_esr: 50mΩ
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test in an empty project directory with no user config."""
    project = tmp_path / "project"
    project.mkdir()
    (project / ".git").mkdir()
    monkeypatch.setattr("smps_tools.config.USER_CONFIG_PATH", tmp_path / "user" / "config.toml")
    monkeypatch.chdir(project)
    yield project
    disable_verbose()


@pytest.fixture
def boost_params():
    """Reference boost converter parameters."""
    return make_boost_config(*REFERENCE_INPUTS)


@pytest.fixture
def design_file(isolated_config: Path) -> Path:
    """Reference design file written to the project directory."""
    path = isolated_config / "boost.yaml"
    path.write_text(REFERENCE_DESIGN, encoding="utf-8")
    return path
