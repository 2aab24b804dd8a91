"""
文字正規化工具測試
"""

import pytest

from src.netim_connector.core.utils.text_utils import (
    canonicalize_punctuation,
    fold,
    special_character,
    strip_accents,
)


class TestStripAccents:
    """去重音測試"""

    def test_latin1_accents(self):
        assert strip_accents("CAFÉ") == "CAFE"
        assert strip_accents("crème brûlée") == "creme brulee"
        assert strip_accents("Ångström") == "Angstrom"

    def test_latin_extended_a(self):
        assert strip_accents("Łódź") == "Lodz"
        assert strip_accents("Dvořák") == "Dvorak"

    def test_ligatures_expand(self):
        """連字轉為兩個字母"""
        assert strip_accents("Straße") == "Strasse"
        assert strip_accents("Ærøskøbing") == "AEroskobing"
        assert strip_accents("cœur") == "coeur"

    def test_eth_maps_to_o_and_d(self):
        assert strip_accents("ð") == "o"
        assert strip_accents("Ð") == "D"

    def test_unmapped_characters_kept(self):
        assert strip_accents("東京 123") == "東京 123"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input(self, value):
        assert strip_accents(value) == ""


class TestCanonicalizePunctuation:
    """標點正規化測試"""

    def test_quotes(self):
        assert canonicalize_punctuation("l’Église") == "l'Église"
        assert canonicalize_punctuation("`a´") == "'a'"
        assert canonicalize_punctuation("“quoted” „low”") == '"quoted" "low"'

    def test_dashes_and_symbols_to_entities(self):
        assert canonicalize_punctuation("A — B") == "A &mdash; B"
        assert canonicalize_punctuation("1–2") == "1&ndash;2"
        assert canonicalize_punctuation("•") == "&#8226;"
        assert canonicalize_punctuation("Acme™") == "Acme&#8482;"
        assert canonicalize_punctuation("©®") == "&copy;&reg;"

    def test_case_preserved(self):
        assert canonicalize_punctuation("MiXeD Case") == "MiXeD Case"


class TestFold:
    """比對 key 測試"""

    def test_fold_cafe(self):
        assert fold("CAFÉ") == "cafe"

    def test_separators_and_commas(self):
        assert fold("Saint-Étienne, France") == "saint etienne france"
        assert fold("new_york") == "new york"

    def test_fold_em_dash(self):
        """破折號先轉為 entity，不會被當作分隔符號"""
        assert fold("a—b") == "a&mdash;b"

    def test_fold_apostrophe(self):
        assert fold("Côte d’Ivoire") == "cote d'ivoire"

    def test_fold_empty(self):
        assert fold(None) == ""
        assert fold("") == ""


class TestSpecialCharacter:
    """送出前清理測試"""

    def test_keeps_accents_and_case(self):
        assert special_character("Zoë O’Brien") == "Zoë O'Brien"

    def test_does_not_strip_whitespace(self):
        assert special_character("  Acme — Corp ") == "  Acme &mdash; Corp "

    def test_none_becomes_empty(self):
        assert special_character(None) == ""
