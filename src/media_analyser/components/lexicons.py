"""
Словари тональности.

Встроенный словарь содержит русские, английские и казахские ключевые слова.
Словари неизменяемы; собственный словарь можно загрузить из YAML-файла
со списками ``positive`` и ``negative``.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Union

import yaml

from ..exceptions import LexiconError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lexicon:
    """Пара наборов ключевых слов: позитивные и негативные."""
    positive: FrozenSet[str]
    negative: FrozenSet[str]

    @classmethod
    def from_words(cls, positive: Iterable[str], negative: Iterable[str]) -> "Lexicon":
        """Создаёт словарь, приводя слова к нижнему регистру."""
        return cls(
            positive=frozenset(w.lower() for w in positive),
            negative=frozenset(w.lower() for w in negative),
        )

    def overlap(self) -> FrozenSet[str]:
        """Слова, попавшие в оба набора."""
        return self.positive & self.negative


POSITIVE_WORDS = (
    # Русские
    "хорошо", "отлично", "успех", "успешно", "улучшение", "прорыв",
    "выигрыш", "развитие", "рост", "достижение", "стабильность", "поддержка",
    "согласие", "мир", "позитив", "доверие", "радость", "улыбка", "помощь",
    "решено", "сильный", "спокойствие", "выгода", "результат", "надежно",
    "эффективно", "восстановление", "благополучие", "усилие", "возможность",
    "достижения", "развивается", "повышение", "поддержали",
    # English
    "good", "great", "excellent", "success", "successful", "positive",
    "improve", "growth", "progress", "benefit", "stable", "support", "peace",
    "trust", "smile", "achievement", "win", "profit", "strong", "safe", "hope",
    # Қазақша
    "жақсы", "керемет", "тамаша", "сәтті", "пайдалы", "өсу", "даму", "табыс",
    "жетістік", "сенім", "сабыр", "оң", "бекем", "қолдау", "үміт",
)

NEGATIVE_WORDS = (
    # Русские
    "плохо", "кризис", "провал", "ошибка", "потери", "спад", "убыток",
    "опасно", "угроза", "катастрофа", "разрушение", "снижение", "ослабление",
    "взрыв", "конфликт", "ненависть", "страх", "тревога", "негатив", "проблема",
    "обострение", "атака", "агрессия", "авария", "хаос", "срыв", "поражение",
    "нестабильность", "вред", "ущерб", "злость", "кризисный", "ухудшение",
    # English
    "bad", "worse", "worst", "fail", "failure", "loss", "threat", "risk",
    "crisis", "danger", "decline", "fall", "attack", "aggression", "hate",
    "problem", "negative", "unstable", "collapse", "conflict", "fear",
    "mistake", "error", "weak", "decrease", "damage",
    # Қазақша
    "жаман", "нашар", "зиян", "қауіп", "құлдырау", "қиын", "мін", "теріс",
    "шығын", "қауіпті", "проблема", "тәуекел", "агрессия", "төмендеу",
    "уайым", "қорқыныш", "дағдарыс", "төбелес", "дау", "зиянды",
)

DEFAULT_LEXICON = Lexicon.from_words(POSITIVE_WORDS, NEGATIVE_WORDS)


def load_lexicon(path: Union[str, Path]) -> Lexicon:
    """
    Загружает словарь тональности из YAML файла.

    Args:
        path: Путь к YAML файлу с ключами positive и negative

    Returns:
        Загруженный словарь

    Raises:
        LexiconError: если файл не читается или имеет неверную структуру
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise LexiconError(f"Не удалось прочитать словарь {path}: {e}") from e

    if not isinstance(data, dict):
        raise LexiconError(f"Словарь {path} должен быть отображением с ключами positive/negative")

    words = {}
    for key in ('positive', 'negative'):
        values = data.get(key) or []
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise LexiconError(f"Раздел '{key}' в {path} должен быть списком строк")
        words[key] = values

    lexicon = Lexicon.from_words(words['positive'], words['negative'])
    overlap = lexicon.overlap()
    if overlap:
        logger.warning(f"Слова присутствуют в обоих наборах словаря {path}: {sorted(overlap)}")
    logger.info(
        f"Словарь загружен: {path} (позитивных: {len(lexicon.positive)}, "
        f"негативных: {len(lexicon.negative)})"
    )
    return lexicon
