"""Tests for decoder settings (DecodeConfig)."""

import json

import pytest

from tiffscope.config import DecodeConfig


class TestDecodeConfigDefault:
    """DecodeConfig.default() returns the built-in settings."""

    def test_defaults(self):
        config = DecodeConfig.default()
        assert config.max_sub_ifd_depth == 4
        assert config.require_word_alignment is True
        assert config.interpret_values is True

    def test_default_returns_fresh_instance(self):
        assert DecodeConfig.default() is not DecodeConfig.default()


class TestDecodeConfigFromJSON:
    """DecodeConfig.from_json() merges overrides over defaults."""

    def test_partial_override(self, tmp_path):
        config_file = tmp_path / 'config.json'
        config_file.write_text(json.dumps({'max_sub_ifd_depth': 2}))

        config = DecodeConfig.from_json(config_file)
        assert config.max_sub_ifd_depth == 2
        assert config.require_word_alignment is True

    def test_bool_override(self, tmp_path):
        config_file = tmp_path / 'config.json'
        config_file.write_text(json.dumps({
            'require_word_alignment': False,
            'interpret_values': False,
        }))

        config = DecodeConfig.from_json(str(config_file))
        assert config.require_word_alignment is False
        assert config.interpret_values is False

    def test_empty_object_is_default(self, tmp_path):
        config_file = tmp_path / 'config.json'
        config_file.write_text('{}')
        assert DecodeConfig.from_json(config_file) == DecodeConfig.default()

    def test_unknown_key_rejected(self, tmp_path):
        config_file = tmp_path / 'config.json'
        config_file.write_text(json.dumps({'max_depth': 2}))
        with pytest.raises(ValueError, match='max_depth'):
            DecodeConfig.from_json(config_file)

    def test_not_an_object(self, tmp_path):
        config_file = tmp_path / 'config.json'
        config_file.write_text('[1, 2]')
        with pytest.raises(ValueError):
            DecodeConfig.from_json(config_file)

    @pytest.mark.parametrize('data', [
        {'max_sub_ifd_depth': -1},
        {'max_sub_ifd_depth': 'deep'},
        {'max_sub_ifd_depth': True},
        {'require_word_alignment': 1},
    ])
    def test_bad_types_rejected(self, tmp_path, data):
        config_file = tmp_path / 'config.json'
        config_file.write_text(json.dumps(data))
        with pytest.raises(ValueError):
            DecodeConfig.from_json(config_file)

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / 'config.json'
        config_file.write_text('{not json')
        with pytest.raises(ValueError):
            DecodeConfig.from_json(config_file)
