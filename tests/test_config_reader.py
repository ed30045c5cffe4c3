# -*- coding: utf-8 -*-
# tests/test_config_reader.py

import pytest

from configs.config_reader import DEFAULT_SETTINGS, ConfigReader

ACCOUNT_YAML = """
accounts:
  ubiregi:
    main:
      secret: main-secret
      token: main-token
    staging:
      secret: staging-secret
      token: staging-token
      endpoint: https://staging.example/api/3/
"""


@pytest.fixture
def config_dir(tmp_path):
    (tmp_path / "account.yaml").write_text(ACCOUNT_YAML, encoding="utf-8")
    (tmp_path / "ubiregi.yaml").write_text("timeout: 10\nlog_level: DEBUG\n", encoding="utf-8")
    return tmp_path


def test_defaults_without_files(tmp_path):
    reader = ConfigReader(str(tmp_path), environ={})
    assert reader.get_ubiregi_config() == DEFAULT_SETTINGS
    assert reader.list_accounts() == []
    assert reader.get_account_credentials() == {"secret": "", "token": "", "endpoint": None}
    assert not reader.validate_account_config()


def test_account_credentials(config_dir):
    reader = ConfigReader(str(config_dir), environ={})
    assert reader.list_accounts() == ["main", "staging"]
    assert reader.get_account_credentials("main") == {
        "secret": "main-secret", "token": "main-token", "endpoint": None,
    }
    assert reader.validate_account_config("staging")


def test_client_settings_merge(config_dir):
    settings = ConfigReader(str(config_dir), environ={}).get_client_settings("staging")
    assert settings["endpoint"] == "https://staging.example/api/3/"
    assert settings["timeout"] == 10
    assert settings["log_level"] == "DEBUG"
    assert settings["salted"] is True

    main = ConfigReader(str(config_dir), environ={}).get_client_settings("main")
    assert main["endpoint"] == "https://ubiregi.com/api/3/"


def test_environment_overrides_file(config_dir):
    environ = {"UBIREGI_TOKEN": "env-token", "UBIREGI_ENDPOINT": "https://env/api/3/"}
    credentials = ConfigReader(str(config_dir), environ=environ).get_account_credentials("main")
    assert credentials == {"secret": "main-secret", "token": "env-token", "endpoint": "https://env/api/3/"}


def test_get_config_key_path(config_dir):
    reader = ConfigReader(str(config_dir), environ={})
    assert reader.get_config("account.yaml", "accounts.ubiregi.main.token") == "main-token"
    assert reader.get_config("account.yaml", "accounts.ubiregi.nobody.token") is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigReader(str(tmp_path)).load_yaml("nope.yaml")


def test_invalid_yaml_raises_value_error(tmp_path):
    (tmp_path / "ubiregi.yaml").write_text("endpoint: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ConfigReader(str(tmp_path)).get_ubiregi_config()


def test_reload_config(config_dir):
    reader = ConfigReader(str(config_dir), environ={})
    assert reader.get_config("ubiregi.yaml", "timeout") == 10
    (config_dir / "ubiregi.yaml").write_text("timeout: 20\n", encoding="utf-8")
    assert reader.get_config("ubiregi.yaml", "timeout") == 10
    reader.reload_config("ubiregi.yaml")
    assert reader.get_config("ubiregi.yaml", "timeout") == 20
