"""
Tests for Pattern Compiler
==========================
Tokenizing patterns into literal text and word tokens.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hhash.pattern import (
    Case,
    CompiledPattern,
    Literal,
    Token,
    TokenRef,
    compile_pattern,
    resolve_token,
)
from hhash.words import WordBank, WordCategory
from hhash.exceptions import EmptyWordListError, UnknownTokenError


class TestResolveToken:
    """Tests for mapping token letters to categories."""

    @pytest.mark.parametrize("code,category", [
        ("a", WordCategory.ADVERB),
        ("j", WordCategory.ADJECTIVE),
        ("n", WordCategory.NOUN),
        ("v", WordCategory.VERB),
    ])
    def test_letters(self, code, category):
        """Each letter maps to its category in either case."""
        assert resolve_token(code) == (category, Case.LOWER)
        assert resolve_token(code.upper()) == (category, Case.TITLE)

    def test_verb_tenses(self):
        """Verb parameters select past and gerund, case-insensitively."""
        assert resolve_token("v", "p")[0] == WordCategory.VERB_PAST
        assert resolve_token("V", "P")[0] == WordCategory.VERB_PAST
        assert resolve_token("v", "g")[0] == WordCategory.VERB_GERUND
        assert resolve_token("V", "G")[0] == WordCategory.VERB_GERUND

    def test_unknown_verb_parameter_is_present_tense(self):
        assert resolve_token("v", "x")[0] == WordCategory.VERB

    def test_parameter_ignored_for_non_verbs(self):
        assert resolve_token("N", "P") == (WordCategory.NOUN, Case.TITLE)

    def test_unknown_letter(self):
        assert resolve_token("q") is None
        assert resolve_token("%") is None


class TestCompilePattern:
    """Tests for compile_pattern()."""

    def test_default_pattern(self):
        """The default pattern compiles to three title-cased tokens."""
        compiled = compile_pattern("%A%V{G}%N")
        assert compiled.segments == (
            TokenRef(Token(WordCategory.ADVERB, Case.TITLE, None, "%A")),
            TokenRef(Token(WordCategory.VERB_GERUND, Case.TITLE, "G", "%V{G}")),
            TokenRef(Token(WordCategory.NOUN, Case.TITLE, None, "%N")),
        )

    def test_literals_preserved_in_order(self):
        compiled = compile_pattern("id-%j_%n!")
        assert compiled.segments[0] == Literal("id-")
        assert isinstance(compiled.segments[1], TokenRef)
        assert compiled.segments[2] == Literal("_")
        assert isinstance(compiled.segments[3], TokenRef)
        assert compiled.segments[4] == Literal("!")

    def test_literal_only(self):
        compiled = compile_pattern("plain text")
        assert compiled.segments == (Literal("plain text"),)
        assert compiled.tokens == ()

    def test_empty_pattern(self):
        compiled = compile_pattern("")
        assert compiled.segments == ()

    def test_consecutive_tokens_stay_separate(self):
        """Same-category tokens keep their own identity."""
        compiled = compile_pattern("%N%N")
        assert len(compiled.segments) == 2
        assert compiled.categories() == [WordCategory.NOUN, WordCategory.NOUN]

    def test_all_inclusive_pattern(self):
        compiled = compile_pattern("%v{G}%N-%a%V-%J%V{P}")
        assert compiled.categories() == [
            WordCategory.VERB_GERUND,
            WordCategory.NOUN,
            WordCategory.ADVERB,
            WordCategory.VERB,
            WordCategory.ADJECTIVE,
            WordCategory.VERB_PAST,
        ]
        cases = [t.case for t in compiled.tokens]
        assert cases == [Case.LOWER, Case.TITLE, Case.LOWER, Case.TITLE, Case.TITLE, Case.TITLE]

    def test_compile_is_deterministic(self):
        """Compiling the same pattern twice yields equal values."""
        assert compile_pattern("%A-%v{p}") == compile_pattern("%A-%v{p}")

    def test_compiled_pattern_is_immutable(self):
        compiled = compile_pattern("%N")
        with pytest.raises(Exception):
            compiled.pattern = "%J"


class TestUnknownTokens:
    """Tests for tokens with no category."""

    def test_unknown_token_passthrough(self):
        """Unknown tokens stay in place as literal text."""
        compiled = compile_pattern("x%qy")
        assert compiled.segments == (Literal("x%qy"),)

    def test_unknown_token_keeps_parameter(self):
        compiled = compile_pattern("%q{P}%N")
        assert compiled.segments[0] == Literal("%q{P}")
        assert compiled.categories() == [WordCategory.NOUN]

    def test_double_percent(self):
        compiled = compile_pattern("100%%")
        assert compiled.segments == (Literal("100%%"),)

    def test_unknown_token_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="hhash.pattern"):
            compile_pattern("%q")
        assert "unable to determine word type" in caplog.text

    def test_strict_raises(self):
        with pytest.raises(UnknownTokenError) as exc_info:
            compile_pattern("ab%q{x}", strict=True)
        assert exc_info.value.token == "%q{x}"
        assert exc_info.value.position == 2

    def test_strict_error_is_value_error(self):
        with pytest.raises(ValueError):
            compile_pattern("%z", strict=True)


class TestScannerEdgeCases:
    """Tests for malformed token syntax."""

    def test_trailing_percent(self):
        assert compile_pattern("%N%").segments[-1] == Literal("%")

    def test_percent_before_non_letter(self):
        compiled = compile_pattern("%1%N")
        assert compiled.segments[0] == Literal("%1")
        assert compiled.categories() == [WordCategory.NOUN]

    def test_unclosed_parameter_is_literal(self):
        compiled = compile_pattern("%V{G")
        assert compiled.tokens[0].category == WordCategory.VERB
        assert compiled.segments[1] == Literal("{G")

    def test_empty_parameter_is_literal(self):
        compiled = compile_pattern("%V{}")
        assert compiled.tokens[0].parameter is None
        assert compiled.segments[1] == Literal("{}")

    def test_non_alphanumeric_parameter_is_literal(self):
        compiled = compile_pattern("%v{g-}")
        assert compiled.tokens[0].category == WordCategory.VERB
        assert compiled.segments[1] == Literal("{g-}")

    def test_non_ascii_letter_is_literal(self):
        assert compile_pattern("%é").segments == (Literal("%é"),)


class TestWordBankValidation:
    """Tests for compiling against a word bank."""

    def test_empty_list_rejected(self):
        bank = WordBank({WordCategory.NOUN: ["fox"]})
        with pytest.raises(EmptyWordListError) as exc_info:
            compile_pattern("%N-%J", word_bank=bank)
        assert exc_info.value.category == WordCategory.ADJECTIVE

    def test_unused_empty_list_allowed(self):
        bank = WordBank({WordCategory.NOUN: ["fox"]})
        compiled = compile_pattern("%N", word_bank=bank)
        assert isinstance(compiled, CompiledPattern)
