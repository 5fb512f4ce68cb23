"""
Компонент для определения тональности текста по ключевым словам.

Каждый токен сверяется с позитивным и негативным наборами словаря.
Пороги несимметричны: одно чистое совпадение даёт нейтральную оценку.
"""

from typing import Iterable, Optional
from ..interfaces.text_processor import (
    SentimentClassifierInterface,
    SentimentLabel,
    SentimentResult,
)
from .lexicons import DEFAULT_LEXICON, Lexicon

# Оценка должна выйти за пределы [-1, 1], чтобы текст перестал быть нейтральным
POSITIVE_THRESHOLD = 1
NEGATIVE_THRESHOLD = -1


class SentimentClassifier(SentimentClassifierInterface):
    """Классификатор тональности на основе словаря."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        """
        Инициализирует классификатор.

        Args:
            lexicon: Словарь тональности (по умолчанию встроенный многоязычный)
        """
        self.lexicon = lexicon or DEFAULT_LEXICON

    def classify(self, tokens: Iterable[str]) -> SentimentResult:
        """
        Определяет тональность последовательности токенов.

        Токен из обоих наборов засчитывается и как позитивный, и как негативный.

        Args:
            tokens: Токены текста

        Returns:
            Количество совпадений и итоговая метка
        """
        positive_hits = 0
        negative_hits = 0
        for token in tokens:
            if token in self.lexicon.positive:
                positive_hits += 1
            if token in self.lexicon.negative:
                negative_hits += 1

        return SentimentResult(
            positive_hits=positive_hits,
            negative_hits=negative_hits,
            label=self.label_for_score(positive_hits - negative_hits),
        )

    @staticmethod
    def label_for_score(score: int) -> SentimentLabel:
        """Переводит числовую оценку в метку тональности."""
        if score > POSITIVE_THRESHOLD:
            return SentimentLabel.POSITIVE
        if score < NEGATIVE_THRESHOLD:
            return SentimentLabel.NEGATIVE
        return SentimentLabel.NEUTRAL
