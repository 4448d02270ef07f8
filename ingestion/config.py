"""
Endpoint Configuration

Loads the meme endpoint settings from config/endpoint.json.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import json
from pathlib import Path


DEFAULT_ENDPOINT_URL = "https://api.imgflip.com/get_memes"
DEFAULT_USER_AGENT = "EpicMemes/1.0"
DEFAULT_SCREEN_TITLE = "Epic Memes"

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'config' / 'endpoint.json'


@dataclass(frozen=True)
class EndpointConfig:
    """
    Settings for the single outbound request.

    timeout_seconds of None leaves the HTTP client's own default in place.
    """
    url: str = DEFAULT_ENDPOINT_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: Optional[float] = None
    screen_title: str = DEFAULT_SCREEN_TITLE

    def __post_init__(self):
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive when set")

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'EndpointConfig':
        """
        Load configuration from JSON.

        With no explicit path the bundled config/endpoint.json is used if it
        exists, otherwise the built-in defaults. An explicit path must exist.
        """
        if config_path is None:
            if not DEFAULT_CONFIG_PATH.exists():
                return cls()
            config_path = DEFAULT_CONFIG_PATH

        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)

        if not isinstance(config, dict):
            raise ValueError(f"{config_path}: expected a JSON object")

        endpoint = _section(config, 'endpoint', config_path)
        screen = _section(config, 'screen', config_path)

        timeout = endpoint.get('timeout_seconds')
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float))):
            raise ValueError(f"{config_path}: 'endpoint.timeout_seconds' must be a number")

        return cls(
            url=_string(endpoint, 'url', DEFAULT_ENDPOINT_URL, 'endpoint', config_path),
            user_agent=_string(endpoint, 'user_agent', DEFAULT_USER_AGENT, 'endpoint', config_path),
            timeout_seconds=float(timeout) if timeout is not None else None,
            screen_title=_string(screen, 'title', DEFAULT_SCREEN_TITLE, 'screen', config_path),
        )


def _section(config: dict, name: str, config_path: Path) -> dict:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"{config_path}: '{name}' must be an object")
    return section


def _string(section: dict, key: str, default: str, section_name: str, config_path: Path) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"{config_path}: '{section_name}.{key}' must be a string")
    return value
