"""
Компонент для подсчёта частотности слов.

Отвечает за подсчёт частоты появления токенов и построение
ранжированной таблицы частот.
"""

from typing import Dict, Iterable
from ..interfaces.text_processor import FrequencyCounterInterface, TermFrequencyTable


class FrequencyCounter(FrequencyCounterInterface):
    """Счётчик частотности токенов без внутреннего состояния."""

    def count_terms(self, tokens: Iterable[str]) -> TermFrequencyTable:
        """
        Подсчитывает частоту появления токенов.

        Слова с одинаковой частотой остаются в порядке первого появления
        (устойчивая сортировка), а не в алфавитном.

        Args:
            tokens: Последовательность токенов

        Returns:
            Список кортежей (токен, частота) по убыванию частоты
        """
        # dict сохраняет порядок вставки - это порядок первого появления
        counts: Dict[str, int] = {}
        for token in tokens:
            counts[token] = counts.get(token, 0) + 1

        # sorted() устойчив, поэтому равные частоты не переставляются
        return sorted(counts.items(), key=lambda item: item[1], reverse=True)
