import logging

from config import config_path, load_config


def _write_config(text: str) -> None:
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


def test_defaults_without_config_file(isolated_dirs) -> None:
    config = load_config()

    assert config.editor == "vi"
    assert config.data_dir == isolated_dirs / "data" / "famcal"
    assert config.log_level == "WARNING"
    assert config.first_weekday == 0
    assert config.log_path.name == "famcal.log"


def test_editor_env_is_used(monkeypatch) -> None:
    monkeypatch.setenv("EDITOR", "nano")
    assert load_config().editor == "nano"


def test_config_file_with_trailing_commas(tmp_path) -> None:
    _write_config(
        '{\n  "editor": "nvim",\n  "data_dir": "%s",\n  "log_level": "debug",\n  "first_weekday": 6,\n}\n'
        % (tmp_path / "elsewhere")
    )

    config = load_config()

    assert config.editor == "nvim"
    assert config.data_dir == tmp_path / "elsewhere"
    assert config.log_level == "DEBUG"
    assert config.first_weekday == 6


def test_invalid_values_fall_back(caplog) -> None:
    _write_config('{"log_level": "chatty", "first_weekday": 9}')

    with caplog.at_level(logging.WARNING, logger="config"):
        config = load_config()

    assert config.log_level == "WARNING"
    assert config.first_weekday == 0
    assert "first_weekday" in caplog.text


def test_unparseable_config_falls_back() -> None:
    _write_config("{ this is not json")
    assert load_config().editor == "vi"

    _write_config('["a", "list"]')
    assert load_config().first_weekday == 0
