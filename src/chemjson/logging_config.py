"""Logging setup for chemjson command-line tools."""

import logging
from pathlib import Path
from typing import Optional

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure the root logger.

    Args:
        verbose: Log at INFO instead of WARNING
        log_file: Optional file that receives the same records as the console
    """
    handlers = [logging.StreamHandler()]
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
