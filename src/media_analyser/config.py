"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс MEDIA_ANALYSER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import os
import copy
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

ENV_PREFIX = 'MEDIA_ANALYSER_'
ENV_PROFILE_VAR = 'MEDIA_ANALYSER_ENV'

DEFAULT_CONFIG: Dict[str, Any] = {
    'text_analysis': {
        # Сколько самых частых слов показывать для одного текста
        'top_words': 10,
    },
    'sentiment': {
        # Путь к YAML словарю (positive/negative); None - встроенный словарь
        'lexicon_file': None,
    },
    'patterns': {
        'max_patterns': 10,
    },
    'files': {
        'results_folder': "data/results",
    },
    'logging': {
        'level': "INFO",
        'format': "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        'log_to_file': False,
        'log_file': "logs/media_analyser.log",
    },
}


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"

            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"

            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}

        self._load_env()
        self._load_config()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        self._configure_logging_if_needed()

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
            logger.debug("Переменные окружения загружены из .env (если есть)")
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _resolve_config_path(self) -> Path:
        env = os.getenv(ENV_PROFILE_VAR, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = copy.deepcopy(DEFAULT_CONFIG)
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                if not isinstance(loaded, dict):
                    raise ValueError("корень файла конфигурации должен быть отображением")
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(
                    f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию"
                )
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = copy.deepcopy(DEFAULT_CONFIG)

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (MEDIA_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == ENV_PROFILE_VAR:
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            self._set_nested(self.config_data, dotted, self._parse_env_value(val))
        if os.getenv(ENV_PROFILE_VAR):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE_VAR)}")

    @staticmethod
    def _parse_env_value(val: str) -> Any:
        """Приводит строку из ENV к bool/int/float, если возможно."""
        if val.lower() in ('true', 'false'):
            return val.lower() == 'true'
        try:
            if '.' in val:
                return float(val)
            return int(val)
        except ValueError:
            return val

    def _validate(self) -> None:
        """Проверяет диапазоны числовых параметров."""
        for dotted in ('text_analysis.top_words', 'patterns.max_patterns'):
            default = self._default_for(dotted)
            try:
                value = int(self.get(dotted, default))
            except (TypeError, ValueError):
                logger.warning(f"{dotted} не является числом - используется {default}")
                value = default
            if value < 1:
                logger.warning(f"{dotted} < 1 - принудительно установлено в 1")
                value = 1
            self._set_nested(self.config_data, dotted, value)

    @staticmethod
    def _default_for(dotted: str) -> Any:
        value: Any = DEFAULT_CONFIG
        for k in dotted.split('.'):
            value = value[k]
        return value

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        level_name = str(self.get_logging_level()).upper()
        level = getattr(logging, level_name, logging.INFO)
        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_media_analyser_configured", False) and not force:
            if (
                getattr(root, "_media_analyser_level", None) == level_name and
                getattr(root, "_media_analyser_format", None) == desired_fmt and
                getattr(root, "_media_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.warning(f"Не удалось открыть файл лога {log_file}: {e}")

        logging.basicConfig(level=level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_media_analyser_configured", True)
        setattr(root, "_media_analyser_level", level_name)
        setattr(root, "_media_analyser_format", desired_fmt)
        setattr(root, "_media_analyser_file", desired_file)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_top_words(self) -> int:
        """Получает количество топ-слов для анализа текста"""
        return self.get('text_analysis.top_words', 10)

    def get_lexicon_file(self) -> Optional[str]:
        """Получает путь к пользовательскому словарю тональности

        Относительный путь отсчитывается от папки найденного config.yaml.
        """
        path = self.get('sentiment.lexicon_file')
        if not path:
            return None
        resolved = Path(os.path.expanduser(str(path)))
        if not resolved.is_absolute():
            resolved = self.config_path.parent / resolved
        return str(resolved)

    def get_max_patterns(self) -> int:
        """Получает максимальное количество паттернов"""
        return self.get('patterns.max_patterns', 10)

    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('files.results_folder', "data/results")

    def get_logging_level(self) -> str:
        """Получает уровень логирования"""
        return self.get('logging.level', "INFO")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', DEFAULT_CONFIG['logging']['format'])

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов"""
        return self.get('logging.log_file', "logs/media_analyser.log")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))


# Глобальный экземпляр конфигурации
config = Config()
