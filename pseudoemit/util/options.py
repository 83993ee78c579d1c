"""File in charge of the theme and logging settings of pseudocode emission."""
import json
import logging
from copy import deepcopy
from os.path import dirname, isfile, join
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Options:
    """Settings keyed by "section.key", as declared in default.json."""

    base = dirname(__file__)
    DEFAULT_CONFIG = join(base, "default.json")
    USER_CONFIG = join(base, "../../", "config.json")

    def __init__(self, settings_key_values: Optional[Dict[str, str]] = None) -> None:
        self._settings_key_values = settings_key_values if settings_key_values is not None else {}

    def getstring(self, key: str, fallback: Optional[str] = None) -> str:
        """
        Return the value of the given "section.key" as string.
        :param fallback - str: if given, return fallback instead of raising KeyError
        """
        if (value := self._settings_key_values.get(key, fallback)) is not None:
            return value if isinstance(value, str) else str(value).lower()
        raise KeyError(f"Invalid setting for {key}")

    @property
    def log_level(self) -> str:
        """Level of the pseudoemit logger, e.g. DEBUG."""
        return self.getstring("logging.log_level", fallback="WARNING").upper()

    @property
    def theme_name(self) -> str:
        """Name of the theme decorating rendered nodes (plain, terminal or html)."""
        return self.getstring("theme.name", fallback="plain").lower()

    @property
    def theme_style(self) -> str:
        """Name of the pygments style used by the terminal and html themes."""
        return self.getstring("theme.style", fallback="paraiso-dark")

    @classmethod
    def load_default_options(cls):
        """Parse the settings declared in default.json."""
        defaults = cls._read_json_file(cls.DEFAULT_CONFIG)
        return cls(settings_key_values=dict(cls._get_key_value_pairs_from_defaults(defaults)))

    @classmethod
    def from_user_config(cls, path: Optional[str] = None):
        """
        Create Options from default.json, overridden by the user config
        (config.json next to the package unless another path is given).
        """
        options = cls.load_default_options()
        options._load_user_config(path if path is not None else cls.USER_CONFIG)
        return options

    @classmethod
    def from_dict(cls, options_dict: Dict[str, str]):
        """Create Options from dict only, without defaults."""
        return cls(settings_key_values=deepcopy(options_dict))

    def _load_user_config(self, path: str):
        """Override settings with the ones found in the user config, if any."""
        if not isfile(path):
            return
        logger.debug(f"user config found at {path}")
        try:
            self._settings_key_values.update(self._read_json_file(path))
        except json.JSONDecodeError:
            logger.warning(f"could not load user config at {path}")

    @staticmethod
    def _read_json_file(filepath: str):
        """Return parsed JSON file"""
        with open(filepath, "r") as f:
            return json.load(f)

    @staticmethod
    def _get_key_value_pairs_from_defaults(defaults: List[Dict]) -> Iterator[Tuple[str, str]]:
        """Extract key value pairs from the option groups of default.json"""
        for option_group in defaults:
            for option in option_group["options"]:
                yield option["dest"], option["default"]
