#!/usr/bin/env python3
"""
Интерфейс командной строки для char_features

Команды:
1. describe - схема признаков (имя, тип, домен)
2. compute  - признаки одного текста в JSON
3. export   - таблица признаков для файла (строка = документ)
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

from .components.assembler import Document, FeatureVectorAssembler, build_default_assembler
from .components.exporter import FeatureExporter
from .interfaces.feature_extractor import FeatureType


def _build_assembler(args: argparse.Namespace) -> FeatureVectorAssembler:
    from .config import config
    modules = [m.strip() for m in args.modules.split(',') if m.strip()] if args.modules else None
    return build_default_assembler(
        config,
        unique_char_repeats=args.unique_char_repeats,
        nth_best=args.nth_best,
        modules=modules,
    )


def run_describe(args: argparse.Namespace) -> int:
    """Выводит схему признаков"""
    assembler = _build_assembler(args)
    metas = assembler.describe()
    if args.json:
        print(json.dumps(FeatureExporter.schema_records(metas), ensure_ascii=False, indent=2))
        return 0

    print(f"📋 Признаков: {len(metas)}")
    for meta in metas:
        if meta.type is FeatureType.CATEGORICAL:
            print(f"   • {meta.name}: {meta.type.value} ({len(meta.domain or ())} значений)")
        else:
            print(f"   • {meta.name}: {meta.type.value}")
    return 0


def run_compute(args: argparse.Namespace) -> int:
    """Считает признаки одного текста"""
    if args.file:
        text = Path(args.file).read_text(encoding='utf-8')
    elif args.text is not None:
        text = args.text
    else:
        print("❌ Укажите текст или --file", file=sys.stderr)
        return 2

    assembler = _build_assembler(args)
    vector = assembler.assemble(Document.from_text(text))
    print(json.dumps(vector.to_dict(), ensure_ascii=False, indent=2))
    return 0


def run_export(args: argparse.Namespace) -> int:
    """Экспортирует признаки для каждой непустой строки входного файла"""
    from .config import config

    lines = Path(args.input).read_text(encoding='utf-8').splitlines()
    documents = [Document.from_text(line) for line in lines if line.strip()]
    if not documents:
        print("⚠️ Во входном файле нет непустых строк", file=sys.stderr)
        return 1

    assembler = _build_assembler(args)
    metas = assembler.describe()
    frame = assembler.assemble_frame(documents)

    exporter = FeatureExporter(
        output_dir=config.get_results_folder(),
        filename_prefix=config.get_results_filename_prefix(),
        sheet_name=config.get_sheet_name(),
    )
    target = exporter.export(frame, metas, args.format, args.output)
    schema = exporter.export_schema(metas, target.with_name(f"{target.stem}_schema.json"))

    print(f"✅ Документов: {len(frame)}, признаков: {len(metas)}")
    print(f"   Таблица: {target}")
    print(f"   Схема:   {schema}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-features",
        description="char_features - признаки символьного уровня для текстов",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python -m char_features.cli describe                    # Схема признаков
  python -m char_features.cli compute "Hello World!!"     # Признаки одного текста
  python -m char_features.cli export --input texts.txt --format csv
        """
    )
    parser.add_argument('--unique-char-repeats', type=int, default=None,
                        help='Число корзин модуля повторов (по умолчанию из config.yaml)')
    parser.add_argument('--nth-best', type=int, default=None,
                        help='Число рангов модуля диапазонов Unicode (по умолчанию из config.yaml)')
    parser.add_argument('--modules', default=None,
                        help='Модули через запятую (по умолчанию features.enabled)')

    sub = parser.add_subparsers(dest='command')

    describe = sub.add_parser('describe', help='Показать схему признаков')
    describe.add_argument('--json', action='store_true', help='Вывести схему в JSON')
    describe.set_defaults(handler=run_describe)

    compute = sub.add_parser('compute', help='Посчитать признаки текста')
    compute.add_argument('text', nargs='?', default=None, help='Текст для анализа')
    compute.add_argument('--file', default=None, help='Читать текст из файла')
    compute.set_defaults(handler=run_compute)

    export = sub.add_parser('export', help='Экспортировать признаки для файла')
    export.add_argument('--input', required=True, help='Входной файл (документ на строку)')
    export.add_argument('--format', choices=['csv', 'excel', 'json'], default='csv')
    export.add_argument('--output', default=None, help='Путь к файлу результата')
    export.set_defaults(handler=run_export)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    from .config import config

    # CHAR_FEATURES_DEBUG=1 принудительно включает DEBUG
    if os.environ.get('CHAR_FEATURES_DEBUG') == '1':
        os.environ['CHAR_FEATURES_LOGGING__LEVEL'] = 'DEBUG'
        config._apply_env_overrides()
    config._configure_logging_if_needed(force=True)

    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, 'handler', None):
        parser.print_help()
        return 1

    try:
        return args.handler(args)
    except (OSError, ValueError) as e:
        print(f"❌ Ошибка: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
