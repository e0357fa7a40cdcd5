from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from cart_parser.config.loader import ConfigError, load_config, resolve_config_path
from cart_parser.files.writer import cart_to_dict, cart_to_frame
from cart_parser.logging.init import log_summary, setup_logging
from cart_parser.services.cart_parser import CartParser, DetailedValidationFailure
from cart_parser.services.orchestrator import ProcessingError, parser_from_config, process_all, scan_source_directory
from cart_parser.services.summary import render_summary_line

"""CLI entrypoint.

Two modes:
- FILE arguments: parse each file and print its cart JSON (no config needed)
- no arguments: load config and parse every CSV of source_directory

Exit codes: 0 all files parsed, 2 at least one file failed, 1 fatal.
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv (values override the process environment)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="cart-parser", description="Shopping cart CSV parser")
    p.add_argument("files", nargs="*", type=Path, help="CSV files to parse (default: configured source_directory)")
    p.add_argument("--config", type=Path, default=None, help="Config file (default: $CART_PARSER_CONFIG or config/cart.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print parsed items as a table then exit")
    return p.parse_args(argv)


def _enable_debug(logger: logging.Logger) -> None:
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)
    logger.debug("debug mode enabled")


def _inspect_files(parser: CartParser, files: list[Path]) -> int:
    code = EXIT_SUCCESS_ALL
    for f in files:
        print(f"FILE: {f.name}")
        try:
            cart = parser.parse_detailed(f)
        except (OSError, UnicodeDecodeError) as e:
            print(f"  read_error: {e}")
            code = EXIT_PARTIAL_FAILURE
            continue
        except DetailedValidationFailure as e:
            print(f"  {e}")
            for err in e.errors:
                print(f"    {err.type.name} row={err.row} column={err.column}: {err.message}")
            code = EXIT_PARTIAL_FAILURE
            continue
        print(cart_to_frame(cart).to_string(index=False))
        print(f"  total={cart.total:.2f}")
    return code


def _parse_files(parser: CartParser, files: list[Path], logger: logging.Logger) -> int:
    code = EXIT_SUCCESS_ALL
    for f in files:
        try:
            cart = parser.parse_detailed(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"{f}: read failed: {e}")
            code = EXIT_PARTIAL_FAILURE
            continue
        except DetailedValidationFailure as e:
            logger.error(f"{f}: {e}")
            for err in e.errors:
                logger.error(f"{f}: row={err.row} column={err.column} {err.message}")
            code = EXIT_PARTIAL_FAILURE
            continue
        print(json.dumps(cart_to_dict(cart), ensure_ascii=False, indent=2))
    return code


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみ sys.argv を読む (テストで main([]) を呼ぶため)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        _enable_debug(logger)

    if args.files:
        parser = CartParser()
        if args.inspect_data:
            return _inspect_files(parser, args.files)
        return _parse_files(parser, args.files, logger)

    config_path = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    logger.info(f"Processing files from: {directory}")

    if args.inspect_data:
        try:
            files = scan_source_directory(directory)
        except ProcessingError as e:
            logger.error(f"inspect: {e}")
            return EXIT_FATAL
        if not files:
            print("inspect: no .csv files")
            return EXIT_SUCCESS_ALL
        return _inspect_files(parser_from_config(cfg), files)

    try:
        result = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    total_files = result.success_files + result.failed_files
    summary_line = render_summary_line(total_files, result)
    # log_summary が "SUMMARY " を付与するため除去
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
