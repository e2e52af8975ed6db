"""
命令行入口 - 按布局文件渲染 cemtext

使用方式：
    cemtext layouts/aba.yaml --rows rows.csv -o out.aba
    cemtext layouts/aba.yaml --rows rows.json --ordering legacy
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .api import Cemtext
from .config import load_layout, reload_config
from .interfaces import CemtextError
from .models import OrderingMode

logger = logging.getLogger(__name__)


def load_rows(path: str | Path) -> list[dict[str, Any]]:
    """读取明细数据（.json 列表/{"rows": [...]}，或带表头的 .csv）"""
    rows_path = Path(path)
    suffix = rows_path.suffix.lower()

    if suffix == ".csv":
        with open(rows_path, encoding="utf-8", newline="") as f:
            return [dict(row) for row in csv.DictReader(f)]

    if suffix == ".json":
        with open(rows_path, encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("rows", [])
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise CemtextError(f"明细数据格式错误（应为对象列表）: {rows_path}")
        return data

    raise CemtextError(f"不支持的明细数据格式: {rows_path.suffix}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cemtext", description="Render a fixed-width cemtext file from a YAML layout.")
    ap.add_argument("layout", help="Layout YAML path")
    ap.add_argument("--rows", help="Detail rows (.json or .csv)")
    ap.add_argument("-o", "--output", help="Output file (default: stdout)")
    ap.add_argument("--config", help="Runtime config YAML path")
    ap.add_argument(
        "--ordering",
        choices=[m.value for m in OrderingMode],
        help="Field ordering mode (overrides runtime config)",
    )
    ap.add_argument("--sequential", action="store_true", help="Render sections sequentially")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = reload_config(args.config) if args.config else reload_config()
        if args.ordering:
            config.rendering.ordering = OrderingMode(args.ordering)
        if args.sequential:
            config.concurrency.parallel_sections = False

        logging.basicConfig(
            level=config.logging.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        layout = load_layout(args.layout)
        rows = load_rows(args.rows) if args.rows else None
        cmtx = Cemtext.from_layout(layout, rows, config=config)

        if args.output:
            cmtx.generate_to_file(args.output)
        else:
            sys.stdout.write(cmtx.generate())
    except (CemtextError, OSError, ValueError) as e:
        logger.debug("渲染失败", exc_info=True)
        print(f"cemtext: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
