"""
Компоненты для анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TokenProcessor - токенизация текста
- FrequencyCounter - подсчёт частотности
- SentimentClassifier - определение тональности по словарю
- PatternMiner - поиск повторяющихся слов в наборе постов
- ResultExporter - экспорт результатов
"""

from .tokenizer import TokenProcessor
from .frequency_analyzer import FrequencyCounter
from .lexicons import Lexicon, DEFAULT_LEXICON, load_lexicon
from .sentiment import SentimentClassifier
from .pattern_miner import PatternMiner
from .exporter import ResultExporter

__all__ = [
    'TokenProcessor',
    'FrequencyCounter',
    'Lexicon',
    'DEFAULT_LEXICON',
    'load_lexicon',
    'SentimentClassifier',
    'PatternMiner',
    'ResultExporter',
]
