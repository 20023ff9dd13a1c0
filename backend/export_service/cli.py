"""
命令行入口

使用方式：
    export-service export request.json -o report.pdf
    export-service export request.json --format csv --config config/export_runtime.yaml

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from .config import LoggingConfig, reload_config
from .interfaces import ExportServiceError
from .models import ExportRequest
from .pipeline import ExportUseCase

logger = logging.getLogger("export_service")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: LoggingConfig, level: str | None = None) -> None:
    """根据 LoggingConfig 配置根日志（level 参数优先）"""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_to_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    logging.basicConfig(
        level=(level or config.log_level).upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="export-service", description="Export tabular data to PDF/XLSX/CSV")
    sub = ap.add_subparsers(dest="command", required=True)

    exp = sub.add_parser("export", help="export a JSON request file")
    exp.add_argument("request", type=Path, help="JSON file with title/format/headers/rows")
    exp.add_argument("-o", "--output", type=Path, help="output file (default: generated name)")
    exp.add_argument("--format", help="override the request format (pdf/excel/csv)")
    exp.add_argument("--config", type=Path, help="runtime YAML configuration")
    exp.add_argument("--log-level", help="DEBUG/INFO/WARNING/ERROR")
    return ap


def run_export(args: argparse.Namespace) -> int:
    runtime = reload_config(args.config)
    configure_logging(runtime.logging, args.log_level)

    try:
        payload = json.loads(args.request.read_text(encoding="utf-8"))
        if args.format:
            payload["format"] = args.format
        data = ExportRequest.model_validate(payload).to_domain()
        result = ExportUseCase.from_config(runtime).export(data)
    except (OSError, json.JSONDecodeError, PydanticValidationError) as e:
        logger.error(f"Cannot read request {args.request}: {e}")
        return 2
    except ExportServiceError as e:
        logger.error(str(e))
        return 1

    output = args.output or Path(result.filename)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result.content)
    logger.info(f"Wrote {output} ({result.mime_type}, {len(result.content)} bytes)")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "export":
        return run_export(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
