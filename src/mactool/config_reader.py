# config_reader.py

import os
import sys
from dataclasses import dataclass, field
from typing import Dict

from mactool.config import DEFAULT_OUI_URL, ENV_PREFIX
from mactool.oui_database import default_database_path

TRUE_VALUES = ('yes', 'true', '1', 'on')

CONFIG_KEYS = ('csv_file', 'oui_url', 'suppress_unmatched', 'debug', 'log_level')


def _to_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUE_VALUES


@dataclass(frozen=True)
class Config:
    """Settings resolved once at start-up and handed to the commands."""
    config_path: str
    config_found: bool = False
    csv_file: str = 'oui.csv'
    oui_url: str = DEFAULT_OUI_URL
    suppress_unmatched: bool = False
    debug: bool = False
    log_level: str = 'normal'
    file_values: Dict[str, str] = field(default_factory=dict)
    env_values: Dict[str, str] = field(default_factory=dict)


class ConfigReader:
    def __init__(self, default_config_path):
        # Initialize the ConfigReader with a default configuration path.
        self.default_config_path = default_config_path

    def default_settings(self):
        return {
            'csv_file': default_database_path(),
            'oui_url': DEFAULT_OUI_URL,
            'suppress_unmatched': 'no',
            'debug': 'no',
            'log_level': 'normal',
        }

    def read_file(self, config_path):
        # Parse a "key = value" file. Returns (values, found).
        values = {}
        try:
            with open(config_path, "r", encoding='utf-8') as config_file:
                for line in config_file:
                    line = line.strip()
                    if not line or line.startswith('#') or '=' not in line:
                        continue
                    key, value = line.split('=', 1)
                    values[key.strip().replace('-', '_')] = value.strip()
        except FileNotFoundError:
            return values, False
        except OSError as e:
            print(f"Error reading configuration file {config_path}: {e}. Using default settings.",
                  file=sys.stderr)
            return values, False
        return values, True

    @staticmethod
    def read_environment(environ=None):
        # Collect MACTOOL_* variables, keyed by their lowercase suffix.
        environ = os.environ if environ is None else environ
        return {
            name[len(ENV_PREFIX):].lower(): value
            for name, value in sorted(environ.items())
            if name.startswith(ENV_PREFIX) and len(name) > len(ENV_PREFIX)
        }

    def read_config(self, config_path=None, environ=None, overrides=None) -> Config:
        """
        Build the configuration. Precedence, highest first: overrides (command
        line flags), MACTOOL_* environment variables, the config file, defaults.
        """
        env_values = self.read_environment(environ)
        if config_path is None:
            config_path = env_values.get('config', self.default_config_path)

        file_values, found = self.read_file(config_path)

        settings = self.default_settings()
        for source in (file_values, env_values):
            for key in CONFIG_KEYS:
                if key in source:
                    settings[key] = source[key]
        for key, value in (overrides or {}).items():
            if value is not None:
                settings[key] = value

        return Config(
            config_path=config_path,
            config_found=found,
            csv_file=os.path.expanduser(str(settings['csv_file'])),
            oui_url=str(settings['oui_url']),
            suppress_unmatched=_to_bool(settings['suppress_unmatched']),
            debug=_to_bool(settings['debug']),
            log_level=str(settings['log_level']).strip().lower(),
            file_values=file_values,
            env_values={ENV_PREFIX + key.upper(): value for key, value in env_values.items()},
        )
