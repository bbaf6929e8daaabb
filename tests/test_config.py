"""Tests for planner configuration."""

import dataclasses

import pytest

from chirpz.config import PlannerConfig, default_config


def test_planner_config_defaults():
    config = PlannerConfig()
    assert config.backend == "numpy"
    assert config.strategy == "scalar"
    assert config.workers is None


def test_planner_config_is_frozen():
    config = PlannerConfig(backend="radix2")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.backend = "numpy"


def test_default_config_reads_environment(monkeypatch):
    monkeypatch.delenv("CHIRPZ_FFT_BACKEND", raising=False)
    assert default_config().backend == "numpy"

    monkeypatch.setenv("CHIRPZ_FFT_BACKEND", "  Torch ")
    assert default_config().backend == "torch"
