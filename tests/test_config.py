"""Tests for DetectionConfig."""

import pytest

from chordsense.core import DetectionConfig
from chordsense.core import constants as C


class TestDetectionConfig:
    """Tests for defaults, overrides and validation."""

    def test_defaults_mirror_constants(self):
        config = DetectionConfig()
        assert config.extra_note_penalty == C.EXTRA_NOTE_PENALTY
        assert config.missing_note_penalty == C.MISSING_NOTE_PENALTY
        assert config.chord_confidence_floor == 0.4
        assert config.scale_confidence_floor == 0.3
        assert config.cache_size == C.DEFAULT_CACHE_SIZE

    def test_from_dict_partial(self):
        config = DetectionConfig.from_dict({"chord_exact_bonus": 0.7})
        assert config.chord_exact_bonus == 0.7
        assert config.scale_exact_bonus == C.SCALE_EXACT_BONUS

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown"):
            DetectionConfig.from_dict({"chord_bonus": 1.0})

    def test_with_overrides_returns_copy(self):
        base = DetectionConfig()
        changed = base.with_overrides(min_scale_notes=5)
        assert changed.min_scale_notes == 5
        assert base.min_scale_notes == C.MIN_SCALE_NOTES

    def test_frozen(self):
        with pytest.raises(Exception):
            DetectionConfig().cache_size = 3

    def test_to_dict_round_trip(self):
        config = DetectionConfig(scale_tonic_bonus=0.1)
        assert DetectionConfig.from_dict(config.to_dict()) == config

    @pytest.mark.parametrize("overrides", [
        {"extra_note_penalty": -0.1},
        {"chord_confidence_floor": 1.5},
        {"scale_relevance_threshold": 2.0},
        {"cache_size": 0},
        {"high_certainty": 1.2},
        {"medium_certainty": 0.9},
        {"compatible_fit": 0.9},
        {"partial_fit": 0.7},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            DetectionConfig(**overrides)

    def test_analysis_bands_default(self):
        config = DetectionConfig()
        assert config.high_certainty == C.HIGH_CERTAINTY
        assert config.medium_certainty == C.MEDIUM_CERTAINTY
        assert (config.partial_fit, config.compatible_fit, config.full_fit) == (0.4, 0.6, 0.8)
