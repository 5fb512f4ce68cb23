"""
Интерфейсы и модели данных для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_processor import (
    Document,
    SentimentLabel,
    SentimentResult,
    TermFrequencyTable,
    TextAnalysisResult,
    TokenProcessorInterface,
    FrequencyCounterInterface,
    SentimentClassifierInterface,
    PatternMinerInterface,
)

__all__ = [
    'Document',
    'SentimentLabel',
    'SentimentResult',
    'TermFrequencyTable',
    'TextAnalysisResult',
    'TokenProcessorInterface',
    'FrequencyCounterInterface',
    'SentimentClassifierInterface',
    'PatternMinerInterface',
]
