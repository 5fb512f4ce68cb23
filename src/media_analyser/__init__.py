"""
Media Analyser - модуль для анализа коротких текстов и постов из соцсетей

Этот модуль предоставляет инструменты для:
- Токенизации многоязычного текста
- Подсчёта частоты слов
- Определения тональности по словарю ключевых слов
- Поиска повторяющихся слов в наборе постов
- Экспорта результатов в JSON, CSV и Excel
"""

__version__ = "0.1.0"

from .exceptions import InvalidInputError, LexiconError
from .interfaces.text_processor import (
    Document,
    SentimentLabel,
    SentimentResult,
    TextAnalysisResult,
)
from .text_analyzer import TextAnalyzer, tokenize, count_terms, classify, mine_patterns

__all__ = [
    "InvalidInputError",
    "LexiconError",
    "Document",
    "SentimentLabel",
    "SentimentResult",
    "TextAnalysisResult",
    "TextAnalyzer",
    "tokenize",
    "count_terms",
    "classify",
    "mine_patterns",
]
