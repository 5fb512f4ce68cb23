#!/usr/bin/env python3
"""
Интерфейс командной строки для Media Analyser

Команды:
1. analyze  - анализ одного текста (строка, файл .txt или stdin)
2. patterns - поиск повторяющихся слов в наборе постов из JSON файла
"""

import sys
import json
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import config
from .exceptions import InvalidInputError, LexiconError
from .text_analyzer import TextAnalyzer
from .text_processor import TextCleaner
from .components.exporter import ResultExporter

logger = logging.getLogger(__name__)


def _print_table(title: str, table) -> None:
    print(f"\n{title}")
    if not table:
        print("   (пусто)")
        return
    for i, (word, count) in enumerate(table, 1):
        print(f"   {i}. {word} — {count}")


def run_analyze(args: argparse.Namespace) -> int:
    """Анализирует один текст и печатает статистику"""
    cleaner = TextCleaner()
    try:
        if args.text is not None:
            text = args.text
            source = "text"
        elif args.file:
            text = cleaner.read_text_file(args.file)
            source = Path(args.file).name
        else:
            text = sys.stdin.read()
            source = "stdin"
        text = cleaner.clean_text(text, strip_html=args.html)

        analyzer = TextAnalyzer.from_config(config)
        if args.top is not None:
            analyzer.top_n = max(1, args.top)
        result = analyzer.analyze_text(text, metadata={'source': source, 'html_stripped': args.html})
    except (InvalidInputError, LexiconError, OSError, ValueError) as e:
        logger.error(f"Ошибка анализа текста: {e}")
        print(f"❌ Ошибка анализа текста: {e}")
        return 1

    print("📊 Результаты анализа:")
    print(f"   Слова: {result.total_words}")
    print(f"   Уникальные: {result.unique_words}")
    print(f"   Тональность: {result.sentiment.label.display_name} "
          f"(+{result.sentiment.positive_hits} / -{result.sentiment.negative_hits})")
    _print_table("🔝 Топ-слова:", result.top_words)

    if args.export:
        try:
            path = ResultExporter(config.get_results_folder()).export_analysis(result, args.export)
        except (OSError, ValueError) as e:
            logger.error(f"Ошибка экспорта: {e}")
            print(f"❌ Ошибка экспорта: {e}")
            return 1
        print(f"\n✅ Результаты экспортированы в: {path}")
    return 0


def run_patterns(args: argparse.Namespace) -> int:
    """Ищет повторяющиеся слова в постах из JSON файла"""
    try:
        documents = TextCleaner().load_documents(args.file)
        analyzer = TextAnalyzer.from_config(config)
        patterns = analyzer.find_patterns(documents)
    except (InvalidInputError, LexiconError, OSError, ValueError) as e:
        # json.JSONDecodeError - подкласс ValueError
        logger.error(f"Ошибка поиска паттернов: {e}")
        print(f"❌ Ошибка поиска паттернов: {e}")
        return 1

    print(f"📈 Проанализировано постов: {len(documents)}")
    _print_table("🔁 Повторяющиеся слова:", patterns)

    if args.export:
        try:
            path = ResultExporter(config.get_results_folder()).export_patterns(
                patterns, args.export, documents_count=len(documents)
            )
        except (OSError, ValueError) as e:
            logger.error(f"Ошибка экспорта: {e}")
            print(f"❌ Ошибка экспорта: {e}")
            return 1
        print(f"\n✅ Паттерны экспортированы в: {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-analyser",
        description="Анализ текста: частотность слов, тональность и повторяющиеся паттерны",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Анализ одного текста")
    source = analyze.add_mutually_exclusive_group()
    source.add_argument("--text", help="Текст для анализа")
    source.add_argument("--file", help="Путь к .txt файлу (UTF-8)")
    analyze.add_argument("--html", action="store_true", help="Удалить HTML теги перед анализом")
    analyze.add_argument("--top", type=int, default=None, help="Сколько топ-слов показать")
    analyze.add_argument("--export", help="Файл экспорта (.json, .csv, .xlsx)")
    analyze.set_defaults(handler=run_analyze)

    patterns = subparsers.add_parser("patterns", help="Поиск паттернов в наборе постов")
    patterns.add_argument("--file", required=True, help="JSON файл с массивом постов")
    patterns.add_argument("--export", help="Файл экспорта (.json, .csv, .xlsx)")
    patterns.set_defaults(handler=run_patterns)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа CLI"""
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
