"""
Тесты для экспорта таблиц признаков.
"""

import json

import pandas as pd
import pytest

from char_features.components.assembler import Document, build_default_assembler
from char_features.components.exporter import FeatureExporter


@pytest.fixture
def feature_table(default_config, sample_texts):
    assembler = build_default_assembler(default_config, unique_char_repeats=2, nth_best=2)
    frame = assembler.assemble_frame(Document.from_text(t) for t in sample_texts.values())
    return frame, assembler.describe()


class TestFeatureExporter:

    def test_make_filepath(self, tmp_path):
        exporter = FeatureExporter(output_dir=tmp_path, filename_prefix="run")
        path = exporter.make_filepath('excel', timestamp="20240101_000000")
        assert path == tmp_path / "run_20240101_000000.xlsx"

    def test_make_filepath_unknown_format(self, tmp_path):
        with pytest.raises(ValueError):
            FeatureExporter(output_dir=tmp_path).make_filepath('parquet')

    def test_csv(self, tmp_path, feature_table):
        frame, metas = feature_table
        path = FeatureExporter().export(frame, metas, 'csv', tmp_path / "out" / "features")
        assert path.suffix == '.csv'
        loaded = pd.read_csv(path)
        assert list(loaded.columns) == [m.name for m in metas]
        assert len(loaded) == len(frame)

    def test_json_lines(self, tmp_path, feature_table):
        frame, metas = feature_table
        path = FeatureExporter().export(frame, metas, 'json', tmp_path / "features.jsonl")
        lines = path.read_text(encoding='utf-8').splitlines()
        assert len(lines) == len(frame)
        assert set(json.loads(lines[0])) == {m.name for m in metas}

    def test_excel_has_schema_sheet(self, tmp_path, feature_table):
        frame, metas = feature_table
        exporter = FeatureExporter(sheet_name="Features")
        path = exporter.export(frame, metas, 'excel', tmp_path / "features.xlsx")

        sheets = pd.read_excel(path, sheet_name=None)
        assert set(sheets) == {"Features", "Schema"}
        assert len(sheets["Features"]) == len(frame)
        assert list(sheets["Schema"]["name"]) == [m.name for m in metas]

    def test_default_path_uses_output_dir(self, tmp_path, feature_table):
        frame, metas = feature_table
        path = FeatureExporter(output_dir=tmp_path, filename_prefix="cf").export(frame, metas, 'csv')
        assert path.parent == tmp_path
        assert path.name.startswith("cf_")

    def test_schema_json(self, tmp_path, feature_table):
        """Тест: домен записывается только для категориальных признаков."""
        _, metas = feature_table
        path = FeatureExporter().export_schema(metas, tmp_path / "schema")
        records = json.loads(path.read_text(encoding='utf-8'))

        by_name = {r['name']: r for r in records}
        assert by_name['lrs-len'] == {'name': 'lrs-len', 'type': 'numeric'}
        assert by_name['unicode-range-name-0']['type'] == 'categorical'
        assert 'none' in by_name['unicode-range-name-0']['domain']
        assert by_name['cap-utterance']['type'] == 'boolean'
