"""Tests for KnowledgeResolver."""

import pytest

from studio_core.knowledge import FAQ_ENTRIES, KnowledgeResolver, resolve
from studio_core.models import KnowledgeEntry

SERVICES, PRICING, DURATION, REGIONS = FAQ_ENTRIES


class TestResolveMatching:
    """Tests for keyword matching."""

    def test_pricing_question(self, resolver):
        """Test the pricing scenario from the chat widget."""
        assert resolver.resolve("сколько стоит проект?") == PRICING.answer

    @pytest.mark.parametrize(
        "text, entry",
        [
            ("Какие услуги у вас есть?", SERVICES),
            ("Чем занимаетесь?", SERVICES),
            ("Какая цена?", PRICING),
            ("Как долго ждать?", DURATION),
            ("Вы работаете в моем городе?", REGIONS),
        ],
    )
    def test_each_entry_reachable(self, resolver, text, entry):
        """Test that each FAQ entry can be matched."""
        assert resolver.resolve(text) == entry.answer

    def test_case_insensitive(self, resolver):
        """Test that matching ignores case."""
        assert resolver.resolve("СТОИМОСТЬ") == PRICING.answer

    def test_substring_without_tokenization(self, resolver):
        """Test that keywords match inside other words."""
        # "где" inside "нигде"
        assert resolver.resolve("нигде не нашел") == REGIONS.answer

    def test_latin_a_variant(self, resolver):
        """Test the mixed-script pricing keyword."""
        assert resolver.resolve("ценa") == PRICING.answer

    def test_first_entry_wins(self, resolver):
        """Test that table order breaks ties."""
        # "услуги" -> services, "сколько" -> pricing, "сроки" -> duration
        assert resolver.resolve("сколько стоят услуги и какие сроки?") == SERVICES.answer
        assert resolver.resolve("сколько времени?") == PRICING.answer

    def test_custom_table_order(self):
        """Test overlapping keywords resolved by entry order."""
        first = KnowledgeEntry("a", "first", frozenset({"дом"}))
        second = KnowledgeEntry("b", "second", frozenset({"дом", "сад"}))

        assert KnowledgeResolver([first, second]).resolve("дом и сад") == "first"
        assert KnowledgeResolver([second, first]).resolve("дом и сад") == "second"


class TestResolveMiss:
    """Tests for inputs without a match."""

    def test_no_keyword(self, resolver):
        """Test the weather scenario returns no match."""
        assert resolver.resolve("расскажите про погоду") is None

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_input(self, resolver, text):
        """Test that blank input yields None."""
        assert resolver.resolve(text) is None

    def test_empty_table(self):
        """Test resolver without entries."""
        assert KnowledgeResolver([]).resolve("сколько стоит") is None


class TestResolvePurity:
    """Tests for determinism."""

    def test_repeated_calls_identical(self, resolver):
        """Test that repeated calls give the same result."""
        results = {resolver.resolve("Когда будет готов проект?") for _ in range(10)}
        assert results == {DURATION.answer}

    def test_module_level_resolve(self):
        """Test the default resolver function."""
        assert resolve("сколько стоит проект?") == PRICING.answer
        assert resolve("погода") is None

    def test_questions_in_order(self, resolver):
        """Test that questions() keeps table order."""
        assert resolver.questions() == [e.question for e in FAQ_ENTRIES]
