import logging
import pytest
from core.exceptions import ConfigError
from inout.config import Config, load_config, validate_config


def test_defaults_without_file():
    config = load_config()
    assert config == Config()
    assert config.level == logging.WARNING


def test_load_yaml_file(tmp_path):
    path = tmp_path / "formula_order.yml"
    path.write_text("log_level: debug\nshow_cycle: true\nrecursion_limit: 5000\n")
    config = load_config(str(path))
    assert config.log_level == "DEBUG"
    assert config.level == logging.DEBUG
    assert config.show_cycle is True
    assert config.recursion_limit == 5000
    assert config.log_file is None


def test_empty_file_yields_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config(str(path)) == Config()


@pytest.mark.parametrize("data", [
    {"log_level": "LOUD"},
    {"show_cycle": "sometimes"},
    {"recursion_limit": 10},
    {"unknown_key": 1},
])
def test_invalid_values(data):
    with pytest.raises(ConfigError, match="validation failed"):
        validate_config(data)


def test_non_mapping_document(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError, match="must be a mapping"):
        load_config(str(path))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("log_level: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read configuration"):
        load_config(str(tmp_path / "absent.yml"))
