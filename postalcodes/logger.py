"""
Structured logging for postalcodes.

Provides centralized logging with console and optional file output,
plus per-operation lookup metrics (hits, misses, miss reasons).
"""

import copy
import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json

from .env import get_settings


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks hit/miss metrics for every lookup operation.
    """

    def __init__(
        self,
        name: str = "postalcodes",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to stderr
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()  # Remove existing handlers

        self.metrics = {
            "lookups": 0,
            "hits": 0,
            "misses": 0,
            "misses_by_reason": {},
            "operations": {},
        }

        # stdout belongs to the CLI's JSON output
        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"postalcodes_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, ensure_ascii=False)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def _operation(self, operation: str) -> dict:
        ops = self.metrics["operations"]
        if operation not in ops:
            ops[operation] = {"lookups": 0, "hits": 0, "misses": 0}
        return ops[operation]

    def record_lookup(self, operation: str):
        """Record a lookup attempt for an operation."""
        self.metrics["lookups"] += 1
        self._operation(operation)["lookups"] += 1

    def record_hit(self, operation: str):
        self.metrics["hits"] += 1
        self._operation(operation)["hits"] += 1

    def record_miss(self, operation: str, reason: str):
        """Record a lookup that found nothing, keyed by its not-found reason."""
        self.metrics["misses"] += 1
        self._operation(operation)["misses"] += 1

        by_reason = self.metrics["misses_by_reason"]
        by_reason[reason] = by_reason.get(reason, 0) + 1

    def get_metrics(self) -> dict:
        """Return current metrics with hit rates filled in."""
        metrics_copy = copy.deepcopy(self.metrics)
        for operation, stats in metrics_copy["operations"].items():
            if stats["lookups"] > 0:
                stats["hit_rate"] = round(stats["hits"] / stats["lookups"], 3)

        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        total = metrics["lookups"]
        hits = metrics["hits"]
        overall_rate = 0
        if total > 0:
            overall_rate = round(hits / total * 100, 1)

        self.info("=== Lookup Metrics ===")
        self.info(f"Lookups: {hits}/{total} ({overall_rate}% found)")

        if metrics["operations"]:
            self.info("Per operation:")
            for operation, stats in metrics["operations"].items():
                rate = stats.get("hit_rate", 0) * 100
                self.info(f"  {operation}: {stats['hits']}/{stats['lookups']} ({rate:.1f}%)")

        if metrics["misses_by_reason"]:
            self.info("Miss reasons:")
            for reason, count in metrics["misses_by_reason"].items():
                self.info(f"  {reason}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "postalcodes",
    level: Optional[str] = None,
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Level and file logging default to the POSTALCODES_LOG_LEVEL and
    POSTALCODES_LOG_DIR settings.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        settings = get_settings()
        kwargs.setdefault("log_dir", settings.log_dir)
        kwargs.setdefault("enable_file", settings.log_dir is not None)
        _global_logger = StructuredLogger(name=name, level=level or settings.log_level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
