"""
Тесты для интерфейса командной строки.
"""

import json

from char_features.cli import main


class TestCli:

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_describe_json(self, capsys):
        code = main(['--unique-char-repeats', '2', '--nth-best', '1', 'describe', '--json'])
        assert code == 0
        records = json.loads(capsys.readouterr().out)
        # 8 + 5 + 8 + 3 + 7
        assert len(records) == 31

    def test_compute(self, capsys):
        code = main(['--modules', 'punctuation', 'compute', '¿Qué?'])
        assert code == 0
        features = json.loads(capsys.readouterr().out)
        assert features['question-count'] == 1
        assert list(features)[0] == 'punctuation-count'

    def test_compute_from_file(self, tmp_path, capsys):
        source = tmp_path / "text.txt"
        source.write_text("Hola", encoding='utf-8')
        assert main(['--modules', 'capitalization', 'compute', '--file', str(source)]) == 0
        assert json.loads(capsys.readouterr().out)['cap-utterance'] is True

    def test_compute_without_text(self):
        assert main(['compute']) == 2

    def test_invalid_parameter(self, capsys):
        assert main(['--unique-char-repeats', '0', 'describe']) == 1
        assert "Ошибка" in capsys.readouterr().err

    def test_export(self, tmp_path, capsys):
        source = tmp_path / "texts.txt"
        source.write_text("Hello world!\n\nHola mundo\n", encoding='utf-8')
        target = tmp_path / "out.csv"

        code = main(['export', '--input', str(source), '--format', 'csv', '--output', str(target)])
        assert code == 0
        assert target.exists()
        assert (tmp_path / "out_schema.json").exists()
        # пустая строка пропускается
        assert len(target.read_text(encoding='utf-8').splitlines()) == 3

    def test_export_empty_input(self, tmp_path):
        source = tmp_path / "empty.txt"
        source.write_text("\n  \n", encoding='utf-8')
        assert main(['export', '--input', str(source)]) == 1
