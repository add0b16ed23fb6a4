"""Tests for vaneck.config."""
import pytest

from vaneck import config
from vaneck.config import REFERENCE_SEED, REFERENCE_TARGET, RunConfig, parse_seed, parse_target
from vaneck.core.errors import InvalidInput


def test_reference_defaults():
    cfg = RunConfig()
    assert cfg.seed == (13, 16, 0, 12, 15, 1)
    assert cfg.target == 30_000_000
    assert cfg.seed == REFERENCE_SEED
    assert cfg.target == REFERENCE_TARGET


def test_run_config_normalizes_seed():
    cfg = RunConfig(seed=[0, 3, 6], target=10)
    assert cfg.seed == (0, 3, 6)


def test_run_config_is_frozen():
    cfg = RunConfig(seed=(0, 3, 6), target=10)
    with pytest.raises(AttributeError):
        cfg.target = 11


@pytest.mark.parametrize("seed, target", [((1,), 10), ((0, -1), 10), ((0, 3, 6), 0)])
def test_run_config_rejects_invalid(seed, target):
    with pytest.raises(InvalidInput):
        RunConfig(seed=seed, target=target)


@pytest.mark.parametrize("text", ["0,3,6", "0 3 6", " 0, 3 ,6 ", "0,3,6,"])
def test_parse_seed(text):
    assert parse_seed(text) == (0, 3, 6)


@pytest.mark.parametrize("text", ["", "5", "1,x", "1,-3"])
def test_parse_seed_invalid(text):
    with pytest.raises(InvalidInput):
        parse_seed(text)


def test_parse_target():
    assert parse_target("2020") == 2020
    assert parse_target("30_000_000") == 30_000_000
    with pytest.raises(InvalidInput):
        parse_target("zero")
    with pytest.raises(InvalidInput):
        parse_target("0")


def test_from_env(monkeypatch):
    monkeypatch.setattr(config, "VANECK_SEED", "1,3,2")
    monkeypatch.setattr(config, "VANECK_TARGET", "2020")
    cfg = RunConfig.from_env()
    assert cfg.seed == (1, 3, 2)
    assert cfg.target == 2020
