import json

import pytest

from bigo_cli.core.config import (
    AnalyzerConfig,
    BigOConfig,
    get_config,
    load_config_file,
    set_config,
)
from bigo_cli.core.exceptions import ConfigurationError


def test_defaults():
    config = BigOConfig()
    assert config.output_format == "table"
    assert config.analyzer.constant_max_lines == 5
    assert config.analyzer.propagation_decay == 10
    assert config.analyzer.confidence_floor == 70
    assert config.analyzer.duplicate_names == "first"


def test_from_dict_maps_flat_keys():
    config = BigOConfig.from_dict(
        {"format": "json", "propagation_decay": 5, "duplicate_names": "last", "debug": True}
    )
    assert config.output_format == "json"
    assert config.debug is True
    assert config.analyzer.propagation_decay == 5
    assert config.analyzer.duplicate_names == "last"


def test_invalid_values_raise():
    with pytest.raises(ConfigurationError):
        AnalyzerConfig(duplicate_names="middle")
    with pytest.raises(ConfigurationError):
        AnalyzerConfig(confidence_floor=5)
    with pytest.raises(ConfigurationError):
        BigOConfig.from_dict({"format": "xml"})
    with pytest.raises(ConfigurationError):
        BigOConfig.from_dict({"colour": "red"})


def test_save_and_reload(tmp_path):
    path = tmp_path / "bigo.json"
    BigOConfig(analyzer=AnalyzerConfig(small_range_limit=50)).save(path)

    data = json.loads(path.read_text())
    assert data["analyzer"]["small_range_limit"] == 50

    config = BigOConfig.from_file(path)
    assert config.analyzer.small_range_limit == 50
    assert isinstance(config.analyzer.constant_collection_names, tuple)


def test_load_config_file_search_order(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    assert load_config_file() == {}

    (tmp_path / "bigo_cli_config.json").write_text('{"format": "json"}')
    assert load_config_file() == {"format": "json"}

    explicit = tmp_path / "explicit.json"
    explicit.write_text('{"debug": true}')
    assert load_config_file(explicit) == {"debug": True}

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert load_config_file(broken) == {"format": "json"}


def test_global_config():
    config = BigOConfig(output_format="json")
    set_config(config)
    assert get_config() is config
