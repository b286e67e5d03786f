from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from settings import THEME_NAMES, GameConfig
from snake_game import run_game

logger = logging.getLogger("snake")

ERROR_LOG_NAME = "error_log.txt"


def _error_log_path() -> Path:
    # 빌드된 EXE는 실행 파일 옆에, 그 외에는 실행한 디렉터리에 남긴다.
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent / ERROR_LOG_NAME
    return Path.cwd() / ERROR_LOG_NAME


def handle_exception(exc_type, exc_value, exc_traceback) -> None:
    """Log an uncaught exception and keep a copy of the traceback on disk."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
    error_log = _error_log_path()
    try:
        with open(error_log, "w", encoding="utf-8") as f:
            f.write(f"{exc_type.__name__}: {exc_value}\n\n")
            traceback.print_exception(exc_type, exc_value, exc_traceback, file=f)
    except OSError:
        logger.exception("Could not write %s", error_log)
        return
    logger.critical("Traceback saved to %s", error_log)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid snake: eat, grow, don't hit the walls.")
    parser.add_argument("--fullscreen", action="store_true", help="start in fullscreen mode")
    parser.add_argument("--theme", choices=THEME_NAMES, default=None, help="initial colour theme")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.excepthook = handle_exception

    try:
        config = GameConfig.from_env()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    score = run_game(config, fullscreen=args.fullscreen, theme=args.theme)
    logger.info("Final score: %d", score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
