# tests/config/test_config_loader.py
import logging

import pytest

from errs import DEFAULT_MESSAGE, ErrsConfig, load_config


def write_config(tmp_path, text: str):
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = ErrsConfig.default()

    assert config.default_message == DEFAULT_MESSAGE
    assert config.stack_limit is None
    assert config.hidden_modules == ()


def test_load_from_explicit_path(tmp_path):
    path = write_config(tmp_path, """
default_message: Something went wrong
stack_limit: 5
hidden_modules:
  - mylib.errors
unknown_key: ignored
""")

    config = load_config(path)

    assert config.default_message == "Something went wrong"
    assert config.stack_limit == 5
    assert config.hidden_modules == ("mylib.errors",)


def test_no_path_gives_defaults_without_reading_the_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path, "stack_limit: 3\n")
    monkeypatch.setenv("ERRS_CONFIG", str(path))
    monkeypatch.setenv("HOME", str(tmp_path))

    assert load_config() == ErrsConfig.default()


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yml") == ErrsConfig.default()


def test_empty_file_gives_defaults(tmp_path):
    assert load_config(write_config(tmp_path, "")) == ErrsConfig.default()


def test_broken_yaml_gives_defaults_and_warns(tmp_path, caplog):
    path = write_config(tmp_path, "stack_limit: [1, 2\n")

    with caplog.at_level(logging.WARNING, logger="errs.config.loader"):
        config = load_config(path)

    assert config == ErrsConfig.default()
    assert "using defaults" in caplog.text


def test_non_mapping_yaml_gives_defaults(tmp_path):
    assert load_config(write_config(tmp_path, "- a\n- b\n")) == ErrsConfig.default()


def test_invalid_values_give_defaults_and_warn(tmp_path, caplog):
    path = write_config(tmp_path, "stack_limit: -1\n")

    with caplog.at_level(logging.WARNING, logger="errs.config.loader"):
        config = load_config(path)

    assert config == ErrsConfig.default()
    assert "Invalid errs config" in caplog.text


@pytest.mark.parametrize("kwargs", [
    {"stack_limit": -1},
    {"stack_limit": "10"},
    {"stack_limit": True},
    {"default_message": None},
])
def test_invalid_config_values_raise(kwargs):
    with pytest.raises(ValueError):
        ErrsConfig(**kwargs)


def test_hidden_modules_accepts_a_single_string():
    assert ErrsConfig(hidden_modules="mylib").hidden_modules == ("mylib",)


def test_to_dict():
    config = ErrsConfig(stack_limit=4, hidden_modules=("a",))

    assert config.to_dict() == {
        "default_message": DEFAULT_MESSAGE,
        "stack_limit": 4,
        "hidden_modules": ["a"],
    }
