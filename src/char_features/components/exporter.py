"""
Компонент для экспорта таблиц признаков.

Отвечает за экспорт результатов в различные форматы:
CSV, Excel (признаки + схема), JSON Lines и отдельный JSON со схемой.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

from ..interfaces.feature_extractor import FeatureMeta

logger = logging.getLogger(__name__)

FORMAT_SUFFIXES = {
    'csv': '.csv',
    'excel': '.xlsx',
    'json': '.jsonl',
}


class FeatureExporter:
    """Экспортёр таблиц признаков."""

    def __init__(self, output_dir: Union[str, Path] = "data/results",
                 filename_prefix: str = "char_features",
                 sheet_name: str = "Features"):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
            filename_prefix: Префикс имён файлов
            sheet_name: Название листа Excel с признаками
        """
        self.output_dir = Path(output_dir)
        self.filename_prefix = filename_prefix
        self.sheet_name = sheet_name

    def make_filepath(self, fmt: str, timestamp: Optional[str] = None) -> Path:
        """Имя файла результата вида <prefix>_<timestamp><suffix> в output_dir."""
        if fmt not in FORMAT_SUFFIXES:
            raise ValueError(f"Неизвестный формат экспорта: {fmt}")
        timestamp = timestamp or datetime.now().strftime("%Y%m%d_%H%M%S")
        return self.output_dir / f"{self.filename_prefix}_{timestamp}{FORMAT_SUFFIXES[fmt]}"

    @staticmethod
    def _prepare(filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    @staticmethod
    def schema_frame(metas: Sequence[FeatureMeta]) -> pd.DataFrame:
        """Схема признаков в виде таблицы (имя, тип, домен)."""
        return pd.DataFrame(
            [
                {
                    'name': meta.name,
                    'type': meta.type.value,
                    'domain': ', '.join(meta.domain) if meta.domain else '',
                }
                for meta in metas
            ],
            columns=['name', 'type', 'domain'],
        )

    @staticmethod
    def schema_records(metas: Sequence[FeatureMeta]) -> List[dict]:
        records = []
        for meta in metas:
            record = {'name': meta.name, 'type': meta.type.value}
            if meta.domain is not None:
                record['domain'] = list(meta.domain)
            records.append(record)
        return records

    def export_to_csv(self, frame: pd.DataFrame, filepath: Union[str, Path]) -> Path:
        """Экспортирует таблицу признаков в CSV."""
        filepath = self._prepare(filepath, '.csv')
        frame.to_csv(filepath, index=False, encoding='utf-8')
        logger.info(f"Признаки экспортированы в CSV: {filepath}")
        return filepath

    def export_to_excel(self, frame: pd.DataFrame, metas: Sequence[FeatureMeta],
                        filepath: Union[str, Path]) -> Path:
        """Экспортирует таблицу признаков и схему в Excel (два листа)."""
        filepath = self._prepare(filepath, '.xlsx')
        with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
            # Категориальные колонки сохраняем как строки
            frame.astype({col: str for col in frame.select_dtypes('category').columns}).to_excel(
                writer, sheet_name=self.sheet_name, index=False)
            self.schema_frame(metas).to_excel(writer, sheet_name='Schema', index=False)
        logger.info(f"Признаки экспортированы в Excel: {filepath}")
        return filepath

    def export_to_json(self, frame: pd.DataFrame, filepath: Union[str, Path]) -> Path:
        """Экспортирует таблицу признаков в JSON Lines (строка на документ)."""
        filepath = self._prepare(filepath, '.jsonl')
        frame.to_json(filepath, orient='records', lines=True, force_ascii=False)
        logger.info(f"Признаки экспортированы в JSON: {filepath}")
        return filepath

    def export_schema(self, metas: Sequence[FeatureMeta], filepath: Union[str, Path]) -> Path:
        """Сохраняет схему признаков в JSON."""
        filepath = self._prepare(filepath, '.json')
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(self.schema_records(metas), f, ensure_ascii=False, indent=2)
        logger.info(f"Схема признаков сохранена: {filepath}")
        return filepath

    def export(self, frame: pd.DataFrame, metas: Sequence[FeatureMeta], fmt: str,
               filepath: Optional[Union[str, Path]] = None) -> Path:
        """Экспорт в указанном формате; путь по умолчанию строится из output_dir."""
        target = Path(filepath) if filepath else self.make_filepath(fmt)
        if fmt == 'csv':
            return self.export_to_csv(frame, target)
        if fmt == 'excel':
            return self.export_to_excel(frame, metas, target)
        if fmt == 'json':
            return self.export_to_json(frame, target)
        raise ValueError(f"Неизвестный формат экспорта: {fmt}")
