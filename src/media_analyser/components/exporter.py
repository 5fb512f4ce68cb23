"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в различные форматы:
JSON, CSV и Excel. Формат выбирается по расширению файла.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union
import pandas as pd
from ..interfaces.text_processor import TermFrequencyTable, TextAnalysisResult
import logging

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ('.json', '.csv', '.xlsx')


class ResultExporter:
    """Экспортёр результатов анализа."""

    def __init__(self, output_dir: Union[str, Path] = "data/results"):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для файлов, заданных только именем
        """
        self.output_dir = Path(output_dir)

    def resolve_path(self, filepath: Union[str, Path], default_suffix: str = '.json') -> Path:
        """
        Определяет итоговый путь файла экспорта.

        Имя без папки кладётся в output_dir, отсутствующее расширение
        заменяется на default_suffix.
        """
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(default_suffix)
        if filepath.suffix.lower() not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Неподдерживаемый формат экспорта: {filepath.suffix} "
                f"(доступны: {', '.join(SUPPORTED_FORMATS)})"
            )
        if not filepath.is_absolute() and filepath.parent == Path('.'):
            filepath = self.output_dir / filepath
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def export_analysis(self, result: TextAnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат анализа одного текста.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу
        """
        filepath = self.resolve_path(filepath)
        suffix = filepath.suffix.lower()

        if suffix == '.json':
            self._write_json(filepath, {
                'metadata': {
                    'timestamp': datetime.now().isoformat(),
                    'total_words': result.total_words,
                    'unique_words': result.unique_words,
                },
                'sentiment': {
                    'label': result.sentiment.label.value,
                    'label_ru': result.sentiment.label.display_name,
                    'positive_hits': result.sentiment.positive_hits,
                    'negative_hits': result.sentiment.negative_hits,
                    'score': result.sentiment.score,
                },
                'top_words': [{'word': w, 'count': c} for w, c in result.top_words],
                'additional_metadata': result.metadata or {},
            })
        elif suffix == '.csv':
            self._frequency_frame(result.top_words).to_csv(filepath, index=False, encoding='utf-8')
        else:
            stats = {
                'Всего слов': result.total_words,
                'Уникальных слов': result.unique_words,
                'Тональность': result.sentiment.label.display_name,
                'Позитивных совпадений': result.sentiment.positive_hits,
                'Негативных совпадений': result.sentiment.negative_hits,
                'Дата анализа': datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            }
            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                self._frequency_frame(result.top_words).to_excel(
                    writer, sheet_name='Топ-слова', index=False
                )
                stats_df = pd.DataFrame({
                    'Параметр': list(stats.keys()),
                    'Значение': [str(v) for v in stats.values()],
                })
                stats_df.to_excel(writer, sheet_name='Статистика', index=False)

        logger.info(f"Результат анализа экспортирован: {filepath}")
        return filepath

    def export_patterns(self, patterns: TermFrequencyTable, filepath: Union[str, Path],
                        documents_count: int = 0) -> Path:
        """
        Экспортирует найденные паттерны.

        Args:
            patterns: Результат поиска паттернов
            filepath: Путь для сохранения файла
            documents_count: Количество проанализированных документов

        Returns:
            Путь к созданному файлу
        """
        filepath = self.resolve_path(filepath)
        suffix = filepath.suffix.lower()

        if suffix == '.json':
            self._write_json(filepath, {
                'metadata': {
                    'timestamp': datetime.now().isoformat(),
                    'documents': documents_count,
                },
                'patterns': [{'word': w, 'count': c} for w, c in patterns],
            })
        elif suffix == '.csv':
            self._frequency_frame(patterns).to_csv(filepath, index=False, encoding='utf-8')
        else:
            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                self._frequency_frame(patterns).to_excel(writer, sheet_name='Паттерны', index=False)

        logger.info(f"Паттерны экспортированы: {filepath} ({len(patterns)} шт.)")
        return filepath

    @staticmethod
    def _frequency_frame(table: TermFrequencyTable) -> pd.DataFrame:
        """Таблица частот в виде DataFrame с сохранением порядка."""
        return pd.DataFrame(list(table), columns=['Слово', 'Частота'])

    @staticmethod
    def _write_json(filepath: Path, data: Dict[str, Any]) -> None:
        with open(filepath, 'w', encoding='utf-8') as jsonfile:
            json.dump(data, jsonfile, ensure_ascii=False, indent=2)
