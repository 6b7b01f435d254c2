"""Tests for configuration helpers."""

import pytest

from globasa_ipa import config
from globasa_ipa.config import parse_format_list


class TestParseFormatList:

    def test_single_key(self):
        assert parse_format_list("ipa") == ["ipa"]

    def test_order_kept(self):
        assert parse_format_list("ssml,ipa,json") == ["ssml", "ipa", "json"]

    def test_whitespace_and_case_ignored(self):
        assert parse_format_list(" IPA , Stressed ") == ["ipa", "stressed"]

    def test_duplicates_and_empty_items_dropped(self):
        assert parse_format_list("ipa,,ipa,ssml,") == ["ipa", "ssml"]

    def test_unknown_key_names_available(self):
        with pytest.raises(ValueError, match="Unknown format 'mp3'") as exc_info:
            parse_format_list("ipa,mp3")
        assert "ssml" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["", " , ,"])
    def test_nothing_given(self, value):
        with pytest.raises(ValueError, match="No output formats"):
            parse_format_list(value)


class TestDefaults:

    def test_default_formats_are_valid(self):
        assert parse_format_list(config.DEFAULT_FORMATS)

    def test_numeric_settings_are_ints(self):
        assert isinstance(config.MAX_INPUT_CHARS, int)
        assert isinstance(config.API_PORT, int)

    def test_log_level_upper_case(self):
        assert config.LOG_LEVEL == config.LOG_LEVEL.upper()
