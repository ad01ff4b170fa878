"""Tests for TOML configuration loading."""

from pathlib import Path

import pytest

from shared.config import HardpassConfig, PolicyConfig, get_config


class TestHardpassConfigLoad:
    """Tests for HardpassConfig.load."""

    def test_defaults(self):
        config = HardpassConfig()
        assert config.policy.min_length == 10
        assert config.policy.max_length == 128
        assert config.policy.min_complexity_classes == 3
        assert config.policy.max_consecutive_repeats == 2
        assert config.policy.enable_topology_check is True
        assert config.policy.feedback_max_score == 0
        assert config.global_settings.output_format == "console"

    def test_load_sections(self, write_config):
        path = write_config(
            """
[global]
log_level = "DEBUG"
output_format = "json"

[policy]
min_length = 12
extra_banned_topologies = ["u l10 d2"]
"""
        )
        config = HardpassConfig.load(path)
        assert config.global_settings.log_level == "DEBUG"
        assert config.global_settings.output_format == "json"
        assert config.policy.min_length == 12
        assert config.policy.max_length == 128
        assert config.policy.extra_banned_topologies == ["u l10 d2"]

    def test_unknown_keys_ignored(self, write_config):
        path = write_config(
            """
[policy]
min_length = 11
entropy_bits = 60

[reporting]
format = "pdf"
"""
        )
        assert HardpassConfig.load(path).policy.min_length == 11

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            HardpassConfig.load(tmp_path / "absent.toml")

    def test_inconsistent_bounds(self, write_config):
        path = write_config("[policy]\nmin_length = 50\nmax_length = 20\n")
        with pytest.raises(ValueError, match="max_length"):
            HardpassConfig.load(path)

    def test_to_dict(self):
        data = HardpassConfig().to_dict()
        assert data["policy"]["min_length"] == 10
        assert data["global_settings"]["log_level"] == "INFO"

    def test_get_config_with_path(self, write_config):
        path = write_config("[policy]\nmin_length = 14\n")
        config = get_config(path)
        assert config.policy.min_length == 14
        assert get_config() is config


class TestPolicyValidation:
    """Tests for PolicyConfig.validate."""

    def test_defaults_are_valid(self):
        PolicyConfig().validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_length": -1},
            {"min_complexity_classes": 0},
            {"min_complexity_classes": 5},
            {"max_consecutive_repeats": 0},
            {"feedback_max_score": 5},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            PolicyConfig(**overrides).validate()


def test_example_config_matches_defaults():
    path = Path(__file__).resolve().parent.parent / "hardpass.example.toml"
    config = HardpassConfig.load(path)
    assert config.to_dict() == HardpassConfig().to_dict()
