from pathlib import Path

import pytest

yaml = pytest.importorskip("yaml")

from fxjournal.config import default_sizing_input, load_config
from fxjournal.sizing import RiskMode


def test_load_config_sample():
    config = load_config(Path("configs") / "journal.yaml")
    assert config.privileged_email == "owner@example.com"
    assert config.cache.ttl_ms == 3_600_000
    assert config.instruments["XAU/USD"]["contract_size"] == 100


def test_defaults_when_sections_missing(tmp_path):
    path = tmp_path / "minimal.yaml"
    path.write_text("name: test\nversion: 2\n", encoding="utf-8")

    config = load_config(path)
    assert config.version == "2"
    assert config.journal.db_path == "runtime/journal.db"

    inputs = default_sizing_input(config)
    assert inputs.risk_mode == RiskMode.PERCENT
    assert inputs.risk_percent == 1.0
    assert inputs.reward_ratio == 2.0
    assert inputs.pair == "EUR/USD"


def test_missing_name_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("version: 1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="name"):
        load_config(path)


def test_invalid_instrument_override_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("name: t\nversion: 1\ninstruments:\n  WTI:\n    contract_size: -5\n", encoding="utf-8")
    with pytest.raises(ValueError, match="WTI.contract_size"):
        load_config(path)
