"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс CHAR_FEATURES_, вложенность через __)
- Валидация параметров модулей признаков
- Настройка логирования
"""

import copy
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
import logging

logger = logging.getLogger(__name__)

ENV_PREFIX = 'CHAR_FEATURES_'
ENV_PROFILE = 'CHAR_FEATURES_ENV'

# Все модули признаков в порядке сборки вектора
ALL_FEATURE_MODULES = ['repeating', 'char_distribution', 'punctuation', 'unicode', 'capitalization']


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Рекурсивно накладывает override на base (base не изменяется)."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


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

        self._load_config()
        self._load_env()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        self._configure_logging_if_needed()

    # --- Загрузка ---
    def _resolve_config_path(self) -> Path:
        env = os.getenv(ENV_PROFILE, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self):
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        defaults = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                if not isinstance(loaded, dict):
                    raise TypeError(f"Корень {self.config_path} должен быть словарём")
                self.config_data = _merge_dicts(defaults, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
                self.config_data = defaults
        except (OSError, yaml.YAMLError, TypeError) as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = defaults

    def _load_env(self):
        """Загружает переменные окружения из .env файла"""
        load_dotenv()

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

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

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (CHAR_FEATURES_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == ENV_PROFILE:
                continue
            # Вложенность разделяется двойным подчёркиванием
            dotted = key[len(ENV_PREFIX):].replace('__', '.').lower()
            self._set_nested(self.config_data, dotted, self._parse_env_value(val))
        if os.getenv(ENV_PROFILE):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE)}")

    def _validate(self) -> None:
        """Проверяет параметры модулей признаков."""
        for dotted in ('features.repeating.unique_char_repeats', 'features.unicode.nth_best'):
            try:
                value = int(self.get(dotted, 1))
            except (TypeError, ValueError):
                logger.warning(f"{dotted} не число — установлено в 1")
                value = 1
            if value < 1:
                logger.warning(f"{dotted} < 1 — принудительно установлено в 1")
                value = 1
            self._set_nested(self.config_data, dotted, value)

        unknown = [name for name in self.get_enabled_modules() if name not in ALL_FEATURE_MODULES]
        if unknown:
            logger.warning(f"Неизвестные модули признаков в features.enabled: {unknown}")

    # --- Логирование ---
    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_char_features_configured", False) and not force:
            if (
                getattr(root, "_char_features_console_level", None) == console_level_name and
                getattr(root, "_char_features_file_level", None) == file_level_name and
                getattr(root, "_char_features_format", None) == desired_fmt and
                getattr(root, "_char_features_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_char_features_configured", True)
        setattr(root, "_char_features_console_level", console_level_name)
        setattr(root, "_char_features_file_level", file_level_name)
        setattr(root, "_char_features_format", desired_fmt)
        setattr(root, "_char_features_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'features': {
                # Модули признаков, из которых собирается вектор (порядок важен)
                'enabled': list(ALL_FEATURE_MODULES),
                'repeating': {
                    # Число корзин по количеству уникальных символов (1..N)
                    'unique_char_repeats': 7
                },
                'unicode': {
                    # Сколько лучших диапазонов Unicode выдавать
                    'nth_best': 3
                },
            },
            'export': {
                'results_folder': "data/results",
                'filename_prefix': "char_features",
                'sheet_name': "Features",
            },
            'logging': {
                'level': "INFO",
                'file_level': "DEBUG",
                'format': "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/char_features_{timestamp}.log",
                'max_log_files': 10,
            },
        }

    # --- Доступ к значениям ---
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

    def get_enabled_modules(self) -> List[str]:
        """Список включённых модулей признаков"""
        enabled = self.get('features.enabled', ALL_FEATURE_MODULES)
        if isinstance(enabled, str):
            enabled = [name.strip() for name in enabled.split(',') if name.strip()]
        return list(enabled)

    def get_unique_char_repeats(self) -> int:
        """Число корзин модуля повторов"""
        return int(self.get('features.repeating.unique_char_repeats', 7))

    def get_nth_best_unicodes(self) -> int:
        """Число рангов модуля диапазонов Unicode"""
        return int(self.get('features.unicode.nth_best', 3))

    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('export.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('export.filename_prefix', "char_features")

    def get_sheet_name(self) -> str:
        """Название листа Excel с признаками"""
        return self.get('export.sheet_name', "Features")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов ({timestamp} заменяется временем запуска)"""
        log_file_template = self.get('logging.log_file', "logs/char_features_{timestamp}.log")
        if "{timestamp}" in log_file_template:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            return log_file_template.replace("{timestamp}", timestamp)
        return log_file_template

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get_logging_file()).parent
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("char_features_*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Сортируем по времени модификации (самые новые последними)
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
