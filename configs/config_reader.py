#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration reader.
Reads the YAML configuration files and UBIREGI_* environment variables:

- ubiregi.yaml: client settings (endpoint, user_agent, timeout, salted, log_dir, log_level)
- account.yaml: credentials, accounts.ubiregi.<name>.{secret, token, endpoint}
  (not committed, see account.example.yaml)

Precedence: environment > account.yaml > ubiregi.yaml > built-in defaults.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
import logging

from ubiregi.drivers.ubiregi.rest import DEFAULT_ENDPOINT
from ubiregi.drivers.ubiregi.signer import DEFAULT_USER_AGENT

SETTINGS_FILE = 'ubiregi.yaml'
ACCOUNT_FILE = 'account.yaml'

ENV_VARS = {
    'secret': 'UBIREGI_SECRET',
    'token': 'UBIREGI_TOKEN',
    'endpoint': 'UBIREGI_ENDPOINT',
}

DEFAULT_SETTINGS = {
    'endpoint': DEFAULT_ENDPOINT,
    'user_agent': DEFAULT_USER_AGENT,
    'timeout': None,
    'salted': True,
    'log_dir': None,
    'log_level': 'INFO',
}


class ConfigReader:
    """Reads the YAML config files and environment overrides."""

    def __init__(self, config_dir: str = None, environ: Optional[Dict[str, str]] = None):
        """
        Args:
            config_dir: directory holding the YAML files, this file's directory by default
            environ: mapping read for UBIREGI_* overrides, os.environ by default
        """
        if config_dir is None:
            config_dir = os.path.dirname(os.path.abspath(__file__))

        self.config_dir = Path(config_dir)
        self.environ = os.environ if environ is None else environ
        self._configs = {}
        self._logger = logging.getLogger(__name__)

    def load_yaml(self, filename: str) -> Dict[str, Any]:
        """
        Load and cache a YAML file.

        Raises:
            FileNotFoundError: the file does not exist
            ValueError: the file is not valid YAML
        """
        file_path = self.config_dir / filename

        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self._logger.error(f"YAML parse error {filename}: {e}")
            raise ValueError(f"YAML parse error in {file_path}: {e}") from e

        self._configs[filename] = config
        self._logger.debug(f"Loaded config file: {filename}")
        return config

    def _load_optional(self, filename: str) -> Dict[str, Any]:
        if filename in self._configs:
            return self._configs[filename]
        if not (self.config_dir / filename).exists():
            self._configs[filename] = {}
            return {}
        return self.load_yaml(filename)

    def get_ubiregi_config(self) -> Dict[str, Any]:
        """ubiregi.yaml merged over the built-in defaults."""
        settings = dict(DEFAULT_SETTINGS)
        settings.update(self._load_optional(SETTINGS_FILE) or {})
        return settings

    def get_account_config(self, account: str = None) -> Dict[str, Any]:
        """
        Args:
            account: account name, None returns every account

        Examples:
            reader.get_account_config('main')
            # {'secret': '...', 'token': '...'}
        """
        accounts = (self._load_optional(ACCOUNT_FILE).get('accounts') or {}).get('ubiregi') or {}
        if account is None:
            return accounts
        return accounts.get(account) or {}

    def list_accounts(self) -> List[str]:
        return list(self.get_account_config().keys())

    def get_account_credentials(self, account: str = 'main') -> Dict[str, str]:
        """
        Credentials of an account with UBIREGI_* environment overrides applied.

        Returns:
            dict: secret, token and endpoint (endpoint may be None)
        """
        account_config = self.get_account_config(account)
        credentials = {
            'secret': account_config.get('secret', ''),
            'token': account_config.get('token', ''),
            'endpoint': account_config.get('endpoint'),
        }
        for key, env_name in ENV_VARS.items():
            value = self.environ.get(env_name)
            if value:
                credentials[key] = value
        return credentials

    def get_client_settings(self, account: str = 'main') -> Dict[str, Any]:
        """Everything needed to build a driver for an account."""
        settings = self.get_ubiregi_config()
        credentials = self.get_account_credentials(account)
        if not credentials['endpoint']:
            credentials['endpoint'] = settings['endpoint']
        settings.update(credentials)
        return settings

    def validate_account_config(self, account: str = 'main') -> bool:
        credentials = self.get_account_credentials(account)
        return bool(credentials['secret'] and credentials['token'])

    def get_config(self, filename: str, key_path: str = None) -> Any:
        """
        Look up a value in a config file.

        Args:
            filename: config file name
            key_path: dot separated path, e.g. 'accounts.ubiregi.main.token'

        Examples:
            endpoint = reader.get_config('ubiregi.yaml', 'endpoint')
        """
        if filename not in self._configs:
            self.load_yaml(filename)

        config = self._configs[filename]

        if key_path is None:
            return config

        value = config
        try:
            for key in key_path.split('.'):
                value = value[key]
            return value
        except (KeyError, TypeError):
            self._logger.warning(f"Config key not found: {key_path}")
            return None

    def reload_config(self, filename: str = None):
        """
        Drop cached files so they are read again.

        Args:
            filename: file to reload, None reloads every cached file
        """
        if filename:
            self._configs.pop(filename, None)
            self.load_yaml(filename)
        else:
            self._configs.clear()

