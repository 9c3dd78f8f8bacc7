"""Unit tests for the cue lexical helpers."""

from __future__ import annotations

import pytest

from cue_commander.cue.lexer import (
    fixed_digits,
    keyword,
    quoted_or_bare,
    quoted_with_tail,
    require,
    token,
)
from cue_commander.exceptions import (
    CueSyntaxError,
    InvalidIdError,
    MissingArgumentError,
    UnexpectedTokenError,
)


class TestKeyword:
    def test_matches_case_insensitively(self) -> None:
        assert keyword("TITLE", 'title "Song"') == '"Song"'
        assert keyword("TITLE", 'TiTlE "Song"') == '"Song"'

    def test_requires_separating_space(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            keyword("TITLE", "TITLE")
        with pytest.raises(UnexpectedTokenError):
            keyword("TITLE", "TITLES x")

    def test_other_keyword_fails(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            keyword("TITLE", "PERFORMER x")
        assert exc_info.value.keyword == "PERFORMER"


class TestToken:
    def test_splits_at_first_space(self) -> None:
        assert token("01 AUDIO") == ("AUDIO", "01")
        assert token("01 00:00:00 extra") == ("00:00:00 extra", "01")

    def test_no_space(self) -> None:
        assert token("01") == ("", "01")

    def test_extra_spaces_dropped(self) -> None:
        assert token("01   AUDIO") == ("AUDIO", "01")


class TestQuotedOrBare:
    def test_quoted(self) -> None:
        assert quoted_or_bare('"Greatest Hits"') == "Greatest Hits"

    def test_bare(self) -> None:
        assert quoted_or_bare("Greatest Hits") == "Greatest Hits"

    def test_empty_quotes(self) -> None:
        assert quoted_or_bare('""') == ""

    def test_no_escape_processing(self) -> None:
        assert quoted_or_bare('"a \\n b"') == "a \\n b"

    def test_unmatched_quote(self) -> None:
        with pytest.raises(CueSyntaxError):
            quoted_or_bare('"unterminated')
        with pytest.raises(CueSyntaxError):
            quoted_or_bare('bare "with quote')


class TestQuotedWithTail:
    def test_quoted_name(self) -> None:
        assert quoted_with_tail('"name with spaces.flac" WAVE') == ("WAVE", "name with spaces.flac")

    def test_bare_name(self) -> None:
        assert quoted_with_tail("album.wav WAVE") == ("WAVE", "album.wav")

    def test_missing_tail(self) -> None:
        assert quoted_with_tail('"album.wav"') == ("", "album.wav")
        assert quoted_with_tail("album.wav") == ("", "album.wav")

    def test_unterminated(self) -> None:
        with pytest.raises(CueSyntaxError):
            quoted_with_tail('"album.wav WAVE')


class TestFixedDigits:
    def test_exact_width(self) -> None:
        assert fixed_digits(2, "01") == 1
        assert fixed_digits(2, "99") == 99
        assert fixed_digits(13, "0000000000042") == 42

    @pytest.mark.parametrize("text", ["1", "001", "1a", "", " 1", "+1", "１２"])
    def test_rejects_other_shapes(self, text: str) -> None:
        with pytest.raises(InvalidIdError):
            fixed_digits(2, text)


def test_require() -> None:
    assert require("TRACK", "AUDIO") == "AUDIO"
    with pytest.raises(MissingArgumentError):
        require("TRACK", "")
