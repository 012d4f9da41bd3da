"""Tests for wordhunt.core.languages – language codes."""

from __future__ import annotations

import pytest

from wordhunt.core.languages import Language


class TestLanguage:
    def test_codes(self):
        assert [lang.value for lang in Language] == ["en", "de"]

    def test_display_names(self):
        assert Language.EN.display_name == "English"
        assert Language.DE.display_name == "Deutsch"

    @pytest.mark.parametrize(("raw", "expected"), [("de", Language.DE), (" EN ", Language.EN), (Language.DE, Language.DE)])
    def test_parse_known(self, raw, expected):
        assert Language.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["fr", "", None, 3, ["en"]])
    def test_parse_unknown(self, raw):
        assert Language.parse(raw) is None
