"""
Logging Configuration for the EIP-7702 delegation scripts

Provides structured logging with:
- Timestamps
- Console and file handlers
- File rotation (1 file per day) and a separate error log
- An append-only audit log of broadcast transactions
"""

import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import Optional
from datetime import datetime


# Log directory, relative to the working directory (override with LOG_DIR)
DEFAULT_LOG_DIR = Path("logs")

# Log formats
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_dir(log_dir: Optional[Path] = None) -> Path:
    """Resolve and create the log directory."""
    if log_dir is None:
        log_dir = Path(os.getenv("LOG_DIR", DEFAULT_LOG_DIR))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
    detailed: bool = False,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Setup a logger with console and file handlers.

    Args:
        name: Logger name (typically the package or command name)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (defaults to name.log)
        console: Whether to log to console
        detailed: Whether to use detailed format (includes file/line)
        log_dir: Directory for log files (defaults to LOG_DIR or ./logs)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("eip7702_delegation", level=logging.DEBUG)
        >>> logger.info("Signing authorization")
        >>> logger.error("Broadcast failed", exc_info=True)
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Already configured: adjust levels instead of adding duplicate handlers
    if _has_file_handler(logger):
        for handler in logger.handlers:
            if handler.get_name() in ("console", "file"):
                handler.setLevel(level)
        return logger

    log_format = DETAILED_FORMAT if detailed else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name("console")
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    log_dir = get_log_dir(log_dir)

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
    file_handler.set_name("file")
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


def setup_tx_logger(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Setup the audit logger for broadcast transactions.

    Entries go to a monthly file that never rotates.
    """
    logger = logging.getLogger("tx_audit")
    logger.setLevel(logging.INFO)
    logger.propagate = False

    if _has_file_handler(logger):
        return logger

    formatter = logging.Formatter(SIMPLE_FORMAT, datefmt=DATE_FORMAT)

    tx_path = get_log_dir(log_dir) / f"transactions_{datetime.now().strftime('%Y%m')}.log"
    tx_handler = logging.FileHandler(tx_path, encoding="utf-8")
    tx_handler.setLevel(logging.INFO)
    tx_handler.setFormatter(formatter)
    logger.addHandler(tx_handler)

    return logger


def log_transaction(
    logger: logging.Logger,
    action: str,
    sender: str,
    chain_id: int,
    tx_hash: Optional[str] = None,
    value: int = 0,
    success: bool = True,
):
    """
    Log a broadcast transaction in structured format.

    Args:
        logger: Audit logger instance
        action: "DELEGATE", "EXECUTE" or "REVOKE"
        sender: EOA that signed the transaction
        chain_id: Chain the transaction was sent to
        tx_hash: Transaction hash
        value: Native value attached (wei)
        success: Whether the broadcast succeeded
    """
    status = "SUCCESS" if success else "FAILED"
    msg = f"{status} | {action} | From: {sender} | Chain: {chain_id} | Value: {value} wei"
    if tx_hash:
        msg += f" | TX: {tx_hash}"

    if success:
        logger.info(msg)
    else:
        logger.error(msg)


def get_command_logger(verbose: bool = False) -> logging.Logger:
    """Get the package logger used by the command scripts.

    Library modules log through ``logging.getLogger(__name__)`` and reach
    these handlers through propagation.
    """
    level = logging.DEBUG if verbose else logging.INFO
    return setup_logger("eip7702_delegation", level=level, detailed=verbose)
