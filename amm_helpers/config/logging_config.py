"""
Logging Configuration for the AMM helpers

Provides structured logging with:
- Timestamps
- Log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- File rotation (1 file per day)
- Separate error log
- Console and file handlers

Library modules only call ``logging.getLogger(__name__)``; the helpers here
are for entry points such as the CLI.
"""

import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import Optional
from datetime import datetime


# Log formats
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_dir() -> Path:
    """Return the log directory (``AMM_LOG_DIR`` or ``./logs``), creating it."""
    log_dir = Path(os.getenv("AMM_LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
    detailed: bool = False,
    to_file: bool = True,
) -> logging.Logger:
    """
    Setup a logger with console and file handlers.

    Args:
        name: Logger name (typically module name)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (defaults to name.log)
        console: Whether to log to console
        detailed: Whether to use detailed format (includes file/line)
        to_file: Whether to attach the rotating file handlers

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("amm_helpers", level=logging.DEBUG)
        >>> logger.info("Resolving pool")
        >>> logger.error("Swap failed", exc_info=True)
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    # Choose format
    log_format = DETAILED_FORMAT if detailed else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    # Console handler
    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not to_file:
        return logger

    log_dir = get_log_dir()

    # File handler with daily rotation
    if log_file is None:
        log_file = f"{name}.log"

    file_handler = TimedRotatingFileHandler(
        log_dir / log_file,
        when="midnight",
        interval=1,
        backupCount=30,  # Keep 30 days of logs
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Separate error log
    error_handler = RotatingFileHandler(
        log_dir / f"{name}_errors.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(error_handler)

    return logger


def setup_trade_logger(name: str) -> logging.Logger:
    """
    Setup logger for swap / liquidity transactions.
    Writes every submitted transaction to a monthly audit file.

    Args:
        name: Name of the caller (e.g., "cli")

    Returns:
        Logger configured for trade logging
    """
    logger_name = f"trade_{name}"
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(SIMPLE_FORMAT, datefmt=DATE_FORMAT)

    # Trade log file (never rotates, keep full history)
    trade_path = get_log_dir() / f"trades_{name}_{datetime.now().strftime('%Y%m')}.log"
    trade_handler = logging.FileHandler(trade_path, encoding="utf-8")
    trade_handler.setLevel(logging.INFO)
    trade_handler.setFormatter(formatter)
    logger.addHandler(trade_handler)

    return logger


def log_swap(
    logger: logging.Logger,
    kind: str,
    path: list[str] | tuple[str, ...],
    amount_in: int,
    amount_out: Optional[int] = None,
    tx_hash: Optional[str] = None,
    success: bool = True,
):
    """
    Log a swap in structured format.

    Args:
        logger: Trade logger instance
        kind: "POOL" or "ROUTER" (or the router function used)
        path: Token path of the swap
        amount_in: Input amount in base units
        amount_out: Output amount in base units, when known
        tx_hash: Transaction hash
        success: Whether the swap succeeded
    """
    status = "SUCCESS" if success else "FAILED"
    msg = f"{status} | {kind} | Path: {' -> '.join(path)} | In: {amount_in}"
    if amount_out is not None:
        msg += f" | Out: {amount_out}"
    if tx_hash:
        msg += f" | TX: {tx_hash}"

    if success:
        logger.info(msg)
    else:
        logger.error(msg)
