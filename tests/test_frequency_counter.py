"""
Тесты для компонента FrequencyCounter.
"""

import pytest
from media_analyser.components.frequency_analyzer import FrequencyCounter


class TestFrequencyCounter:
    """Тесты для FrequencyCounter."""

    def test_empty_input(self):
        """Пустой вход даёт пустую таблицу."""
        assert FrequencyCounter().count_terms([]) == []

    def test_sorted_by_count_descending(self):
        counter = FrequencyCounter()
        table = counter.count_terms(["x", "y", "y", "z", "y", "z"])
        assert table == [("y", 3), ("z", 2), ("x", 1)]

    def test_tie_break_by_first_occurrence(self):
        """Равные частоты остаются в порядке первого появления, а не по алфавиту."""
        counter = FrequencyCounter()
        assert counter.count_terms(["b", "a", "b", "a"]) == [("b", 2), ("a", 2)]

    def test_tie_break_among_singletons(self):
        counter = FrequencyCounter()
        assert counter.count_terms(["я", "а", "б"]) == [("я", 1), ("а", 1), ("б", 1)]

    @pytest.mark.parametrize("tokens", [
        [],
        ["a"],
        ["a", "b", "a", "c", "c", "c"],
        ["рост", "рост", "кризис", "growth", "рост"],
    ])
    def test_counts_sum_to_length(self, tokens):
        """Сумма частот равна длине входа."""
        table = FrequencyCounter().count_terms(tokens)
        assert sum(count for _, count in table) == len(tokens)

    def test_tokens_unique_and_counts_non_increasing(self):
        tokens = ["c", "a", "b", "a", "c", "d", "c", "b", "e"]
        table = FrequencyCounter().count_terms(tokens)
        words = [w for w, _ in table]
        counts = [c for _, c in table]

        assert len(words) == len(set(words))
        assert counts == sorted(counts, reverse=True)

    def test_accepts_tuple_and_generator(self):
        counter = FrequencyCounter()
        assert counter.count_terms(("a", "a")) == [("a", 2)]
        assert counter.count_terms(t for t in ["a", "b", "b"]) == [("b", 2), ("a", 1)]

    def test_returns_fresh_list(self):
        """Каждый вызов возвращает новый объект без общего состояния."""
        counter = FrequencyCounter()
        first = counter.count_terms(["a", "b"])
        first.append(("zzz", 100))
        second = counter.count_terms(["a", "b"])
        assert second == [("a", 1), ("b", 1)]

    def test_top_k_is_prefix(self):
        """Топ-K - это срез полной таблицы."""
        counter = FrequencyCounter()
        tokens = ["a", "b", "b", "c", "c", "c"]
        assert counter.count_terms(tokens)[:2] == [("c", 3), ("b", 2)]
