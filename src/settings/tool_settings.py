"""
Settings for the markup tool.
Stored as JSON, by default in ~/.markup_text_tool/settings.json.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from helpers.http_client import HttpClientOptions
from markup_engine.colors import OPAQUE_WHITE, parse_color, to_hex


logger = logging.getLogger(__name__)


@dataclass
class ToolSettings:
    """Settings read by the command line tool."""
    default_color: str = "#FFFFFFFF"
    json_indent: int = 2
    allow_untrusted_certificates: bool = False
    http_timeout: float = 10.0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ToolSettings':
        """
        Build settings from parsed JSON. Unknown keys are ignored.

        Raises:
            TypeError: if data is not a dict or a value has the wrong type
        """
        if not isinstance(data, dict):
            raise TypeError(f"Settings must be a JSON object, got {type(data).__name__}")

        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = _FIELD_TYPES[f.name]
            # bool is an int subclass, so only accept it where a bool is expected
            if isinstance(value, bool) and expected is not bool:
                raise TypeError(f"Setting '{f.name}' must be {expected.__name__}, got bool")
            if expected is float and isinstance(value, int):
                value = float(value)
            if not isinstance(value, expected):
                raise TypeError(
                    f"Setting '{f.name}' must be {expected.__name__}, got {type(value).__name__}")
            values[f.name] = value
        return cls(**values)

    def default_argb(self) -> int:
        """Default color as an ARGB int."""
        return parse_color(self.default_color)

    def http_options(self) -> HttpClientOptions:
        return HttpClientOptions(
            timeout=self.http_timeout,
            allow_untrusted_certificates=self.allow_untrusted_certificates,
        )


_FIELD_TYPES = {
    'default_color': str,
    'json_indent': int,
    'allow_untrusted_certificates': bool,
    'http_timeout': float,
}


class SettingsManager:
    """
    Loads and saves ToolSettings.
    """

    def __init__(self, settings_path: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            settings_path: Path to JSON settings file.
                          If None, uses default location.
        """
        if settings_path:
            self.settings_path = Path(settings_path)
        else:
            self.settings_path = Path.home() / '.markup_text_tool' / 'settings.json'

        self.settings = ToolSettings(default_color=to_hex(OPAQUE_WHITE))

    def load(self) -> bool:
        """Load settings from the JSON file. Keeps defaults if the file is missing or invalid."""
        try:
            if not self.settings_path.exists():
                return False

            with open(self.settings_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                logger.warning("Ignoring settings in %s: expected a JSON object", self.settings_path)
                return False

            self.settings = ToolSettings.from_dict(data)
            return True

        except (OSError, ValueError, TypeError) as e:
            logger.warning("Error loading settings from %s: %s", self.settings_path, e)
            return False

    def save(self) -> bool:
        """Save settings to the JSON file."""
        try:
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(self.settings.to_dict(), f, indent=2, ensure_ascii=False)

            return True

        except OSError as e:
            logger.warning("Error saving settings to %s: %s", self.settings_path, e)
            return False

    def update(self, key: str, value: str) -> None:
        """
        Set one setting from its string form.

        Raises:
            KeyError: if key is not a known setting
            ValueError: if value cannot be converted
        """
        current = getattr(self.settings, key, None)
        if key not in self.settings.to_dict():
            raise KeyError(key)

        if key == 'default_color':
            converted: Any = to_hex(parse_color(value))
        elif isinstance(current, bool):
            if value.lower() not in ('true', 'false', '1', '0', 'yes', 'no'):
                raise ValueError(f"Expected a boolean for '{key}', got '{value}'")
            converted = value.lower() in ('true', '1', 'yes')
        elif isinstance(current, int):
            converted = int(value)
        elif isinstance(current, float):
            converted = float(value)
        else:
            converted = value

        setattr(self.settings, key, converted)
