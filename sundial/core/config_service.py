"""
Configuration Service - YAML config with environment variable overrides
"""
import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml


logger = logging.getLogger(__name__)

PACKAGED_CONFIG = Path(__file__).resolve().parent.parent / 'config' / 'default.yaml'

DEFAULT_CONFIG_PATHS = (
    Path('/data/sundial.yaml'),  # Production path
    Path('config/sundial.yaml'),  # Development path
    PACKAGED_CONFIG,
)

_TRUE_VALUES = ('true', '1', 'yes', 'on')


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


# env var -> (dotted key, converter)
ENV_OVERRIDES = {
    'TIMEZONE': ('timezone', str),
    'SUNDIAL_LATITUDE': ('location.latitude', float),
    'SUNDIAL_LONGITUDE': ('location.longitude', float),
    'AUTO_LOCATE': ('location.auto_locate', _parse_bool),
    'GNOMON_STYLE': ('dial.gnomon_style', str),
    'GNOMON_LENGTH_SCALE': ('dial.gnomon_length_scale', float),
    'SHOW_COMPASS_ROSE': ('dial.show_compass_rose', _parse_bool),
    'DISPLAY_WIDTH': ('display.width', int),
    'DISPLAY_HEIGHT': ('display.height', int),
    'DISPLAY_FULLSCREEN': ('display.fullscreen', _parse_bool),
    'LOG_LEVEL': ('logging.level', str),
    'SNAPSHOT_PATH': ('snapshot.path', str),
}


class ConfigService:
    """
    Configuration access for the sundial.

    Priority order:
    1. Environment variables (highest)
    2. First YAML file found on the search path
    3. Built-in defaults (lowest)
    """

    def __init__(self, config_paths: Optional[Iterable[Path]] = None,
                 environ: Optional[Dict[str, str]] = None):
        """
        Args:
            config_paths: YAML files to try in order
            environ: Environment mapping, defaults to os.environ
        """
        self._config_paths = tuple(config_paths) if config_paths is not None else DEFAULT_CONFIG_PATHS
        self._environ = environ if environ is not None else os.environ
        self._config: Dict[str, Any] = {}
        self._source: Optional[Path] = None
        self.reload()

    def reload(self) -> None:
        """Load config from file and environment"""
        self._config = self._load_yaml_config()
        self._apply_env_overrides()

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Merge the first readable YAML file over the defaults"""
        config = self._get_defaults()
        self._source = None

        for config_path in self._config_paths:
            if not config_path.exists():
                continue
            try:
                with open(config_path, 'r') as f:
                    loaded = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load {config_path}: {e}")
                continue
            if not isinstance(loaded, dict):
                logger.warning(f"Ignoring {config_path}: top level is not a mapping")
                continue
            _deep_merge(config, loaded)
            self._source = config_path
            break

        return config

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides; unparsable values are skipped"""
        for env_name, (key, convert) in ENV_OVERRIDES.items():
            raw = self._environ.get(env_name)
            if raw is None or raw == '':
                continue
            try:
                value = convert(raw)
            except ValueError:
                logger.warning(f"Ignoring {env_name}={raw!r}: not a valid {convert.__name__}")
                continue
            self.set(key, value)
            logger.debug(f"Using {env_name} from environment for {key}")

    def _get_defaults(self) -> Dict[str, Any]:
        """Return default configuration"""
        return {
            'app': {'version': '1.0.0'},
            'timezone': '',
            'location': {
                'latitude': 32.74554724936368,
                'longitude': -117.14900988976665,
                'auto_locate': False,
                'lookup_url': 'https://ipapi.co/json/',
                'lookup_timeout': 10,
            },
            'dial': {
                'gnomon_style': 'curved_wall',
                'gnomon_length_scale': 0.8,
                'show_compass_rose': False,
            },
            'display': {
                'width': 900,
                'height': 760,
                'fullscreen': False,
                'frame_interval_ms': 16,
            },
            'health': {
                'check_interval': 5,
                'timeout': 15,
            },
            'logging': {'level': 'INFO'},
            'snapshot': {'path': ''},
        }

    def validate(self) -> bool:
        """
        Check value types of the loaded configuration.

        Values of the wrong type are logged and replaced with their defaults.

        Returns:
            True if every value was valid
        """
        valid = True

        numeric = ('location.latitude', 'location.longitude', 'location.lookup_timeout',
                   'dial.gnomon_length_scale', 'health.check_interval', 'health.timeout')
        for key in numeric:
            value = self.get(key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                self._reset_to_default(key, "must be a number")
                valid = False

        for key in ('display.width', 'display.height', 'display.frame_interval_ms'):
            value = self.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                self._reset_to_default(key, "must be a non-negative integer")
                valid = False

        for key in ('location.auto_locate', 'dial.show_compass_rose', 'display.fullscreen'):
            if not isinstance(self.get(key), bool):
                self._reset_to_default(key, "must be a boolean")
                valid = False

        for key in ('dial.gnomon_style', 'logging.level'):
            if not isinstance(self.get(key), str):
                self._reset_to_default(key, "must be a string")
                valid = False

        return valid

    def _reset_to_default(self, key: str, problem: str) -> None:
        """Replace an invalid value with its default"""
        default = self._get_defaults()
        for k in key.split('.'):
            default = default[k]
        logger.warning(f"Invalid {key}={self.get(key)!r} ({problem}), using {default!r}")
        self.set(key, default)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation
        Example: config.get('dial.gnomon_style')
        """
        value = self._config
        for k in key.split('.'):
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        return value

    def get_all(self) -> Dict[str, Any]:
        """Get a copy of the entire configuration"""
        return copy.deepcopy(self._config)

    def set(self, key: str, value: Any) -> None:
        """
        Set config value using dot notation
        Example: config.set('dial.show_compass_rose', True)
        """
        keys = key.split('.')
        target = self._config
        for k in keys[:-1]:
            if not isinstance(target.get(k), dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value

    @property
    def source(self) -> Optional[Path]:
        """YAML file the configuration was read from, if any"""
        return self._source


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


# Global instance
config = ConfigService()
