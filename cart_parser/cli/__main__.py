from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from cart_parser.config.loader import DEFAULT_CONFIG_PATH, CartConfig, ConfigError, load_config
from cart_parser.logging.error_log import ErrorLogBuffer
from cart_parser.logging.init import log_summary, setup_logging
from cart_parser.services.pipeline import ValidationFailed, parse_file
from cart_parser.services.summary import render_failure_line, render_summary_line
from cart_parser.table.reader import CartFileError

"""CLI entrypoint.

Flow:
- Load config (config/cart.yml when present)
- Parse the cart file given on the command line (or config source_file)
- Print the cart as JSON on stdout and a SUMMARY line on the log channel

Exit codes: 0 success, 1 config / file problem, 2 validation failed.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_VALIDATION_FAILED = 2


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Validate a shopping cart CSV file and compute its total")
    p.add_argument("path", nargs="?", help="Cart CSV file (overrides source_file in config)")
    p.add_argument("--config", type=Path, default=None, help=f"Config file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _resolve_config(config_path: Path | None) -> CartConfig:
    # 明示指定された config は存在必須。既定パスは無ければ既定値で続行
    if config_path is not None:
        return load_config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return CartConfig.default()


def _write_error_log(cfg: CartConfig, source: str, exc: ValidationFailed, logger: logging.Logger) -> None:
    buffer = ErrorLogBuffer(Path(cfg.logs_directory))
    buffer.extend(exc.errors, file=source)
    try:
        path = buffer.flush()
    except OSError as e:
        logger.warning(f"failed to write error log: {e}")
        return
    logger.info(f"error log written: {path}")


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみシステム引数を読む ([] はテストから渡される)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        for h in logger.handlers:
            h.setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    source = args.path or cfg.source_file
    if not source:
        logger.error("no cart file given (pass a path or set source_file in config)")
        return EXIT_FATAL

    logger.info(f"Parsing cart file: {source}")

    try:
        result = parse_file(source)
    except CartFileError as e:
        logger.error(f"file: {e}")
        return EXIT_FATAL
    except ValidationFailed as e:
        if cfg.write_error_log and e.errors:
            _write_error_log(cfg, source, e, logger)
        log_summary(render_failure_line(e.errors)[8:])  # strip "SUMMARY " prefix
        return EXIT_VALIDATION_FAILED

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    log_summary(render_summary_line(result)[8:])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
