"""
Unit tests for TimelineConfig.
"""

import json

import pytest

from timelane.core.config import TimelineConfig, load_config


class TestTimelineConfig:
    """Tests for defaults, validation and serialization."""

    def test_defaults(self):
        config = TimelineConfig()

        assert config.lane_height == 56
        assert config.lane_spacing == 60
        assert config.min_width_fraction == 0.03
        assert (config.zoom_min, config.zoom_max, config.zoom_step) == (0.5, 3.0, 0.25)

    def test_round_trip(self):
        config = TimelineConfig(lane_height=30, zoom_max=4.0)

        assert TimelineConfig.from_dict(config.to_dict()) == config

    def test_unknown_keys_ignored(self, caplog):
        config = TimelineConfig.from_dict({"lane_height": 30, "colour": "red"})

        assert config.lane_height == 30
        assert "colour" in caplog.text

    @pytest.mark.parametrize(
        "overrides",
        [
            {"zoom_min": 0},
            {"zoom_min": 2.0, "zoom_max": 1.0},
            {"zoom_step": 0},
            {"min_width_fraction": 1.5},
            {"lane_height": 0},
            {"content_padding": -1},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            TimelineConfig(**overrides)


class TestLoadConfig:
    """Tests for reading config files."""

    def test_none_gives_defaults(self):
        assert load_config(None) == TimelineConfig()

    def test_reads_json_object(self, tmp_path):
        path = tmp_path / "timeline.json"
        path.write_text(json.dumps({"lane_spacing": 80}))

        assert load_config(path).lane_spacing == 80

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "timeline.json"
        path.write_text("[1, 2]")

        with pytest.raises(ValueError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_config(tmp_path / "missing.json")
