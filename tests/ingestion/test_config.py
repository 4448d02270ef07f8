"""
Endpoint Configuration Tests
"""

import json
from pathlib import Path
import pytest
from dataclasses import FrozenInstanceError

from ingestion.config import (
    DEFAULT_CONFIG_PATH, DEFAULT_ENDPOINT_URL, DEFAULT_SCREEN_TITLE, EndpointConfig,
)


def write_config(tmp_path, document) -> Path:
    path = tmp_path / "endpoint.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestEndpointConfig:

    def test_defaults(self):
        config = EndpointConfig()

        assert config.url == DEFAULT_ENDPOINT_URL
        assert config.timeout_seconds is None
        assert config.screen_title == DEFAULT_SCREEN_TITLE

    def test_bundled_config_points_at_imgflip(self):
        assert DEFAULT_CONFIG_PATH.exists()

        config = EndpointConfig.load()

        assert config.url == "https://api.imgflip.com/get_memes"
        assert config.screen_title == "Epic Memes"

    def test_load_overrides(self, tmp_path):
        path = write_config(tmp_path, {
            "endpoint": {"url": "http://localhost:9000/memes", "timeout_seconds": 2},
            "screen": {"title": "Local Memes"},
        })

        config = EndpointConfig.load(path)

        assert config.url == "http://localhost:9000/memes"
        assert config.timeout_seconds == 2.0
        assert config.screen_title == "Local Memes"
        assert config.user_agent == EndpointConfig().user_agent

    def test_missing_sections_fall_back(self, tmp_path):
        config = EndpointConfig.load(write_config(tmp_path, {}))

        assert config == EndpointConfig()

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EndpointConfig.load(tmp_path / "absent.json")

    def test_non_object_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            EndpointConfig.load(write_config(tmp_path, ["not", "an", "object"]))

    @pytest.mark.parametrize("document", [
        {"endpoint": None},
        {"endpoint": ["https://api.imgflip.com/get_memes"]},
        {"screen": None},
        {"screen": "Epic Memes"},
    ])
    def test_non_object_section_rejected(self, tmp_path, document):
        with pytest.raises(ValueError, match="must be an object"):
            EndpointConfig.load(write_config(tmp_path, document))

    @pytest.mark.parametrize("document", [
        {"endpoint": {"url": 42}},
        {"endpoint": {"url": None}},
        {"endpoint": {"user_agent": ["EpicMemes"]}},
        {"screen": {"title": False}},
    ])
    def test_non_string_values_rejected(self, tmp_path, document):
        with pytest.raises(ValueError, match="must be a string"):
            EndpointConfig.load(write_config(tmp_path, document))

    @pytest.mark.parametrize("timeout", ["2", True, {"read": 2}])
    def test_non_numeric_timeout_rejected(self, tmp_path, timeout):
        path = write_config(tmp_path, {"endpoint": {"timeout_seconds": timeout}})

        with pytest.raises(ValueError):
            EndpointConfig.load(path)

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError):
            EndpointConfig(timeout_seconds=0)

    def test_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            EndpointConfig().url = "http://elsewhere"
