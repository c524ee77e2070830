"""
Structured logging for refmatch.

Provides centralized logging with console and file outputs plus
counters that describe how a matching run treated its candidate pairs.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics for monitoring refactoring extraction runs.
    """

    def __init__(
        self,
        name: str = "refmatch",
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
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()

        self.metrics = {
            "pairs_scored": 0,
            "pairs_rejected_incompatible": 0,
            "pairs_below_threshold": 0,
            "pairs_queued": 0,
            "pairs_committed": 0,
            "pairs_conflicting": 0,
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
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

            log_file = log_dir / f"refmatch_{datetime.now().strftime('%Y%m%d')}.log"
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
        if not self.logger.isEnabledFor(level):
            return
        if context:
            # Candidates are arbitrary objects, fall back to their repr
            message = f"{message} | Context: {json.dumps(context, default=repr)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_scored(self):
        """Count a combination whose similarity was computed."""
        self.metrics["pairs_scored"] += 1

    def record_incompatible(self):
        """Count a combination skipped before scoring."""
        self.metrics["pairs_rejected_incompatible"] += 1

    def record_below_threshold(self):
        """Count a scored pair that did not reach the threshold."""
        self.metrics["pairs_below_threshold"] += 1

    def record_queued(self):
        """Count a pair placed in the ranking queue."""
        self.metrics["pairs_queued"] += 1

    def record_commit(self):
        """Count a pair accepted as a refactoring."""
        self.metrics["pairs_committed"] += 1

    def record_conflict(self):
        """Count a queued pair dropped because a candidate was already taken."""
        self.metrics["pairs_conflicting"] += 1

    def get_metrics(self) -> dict:
        """Return current metrics."""
        metrics_copy = self.metrics.copy()
        queued = metrics_copy["pairs_queued"]
        metrics_copy["commit_rate"] = (
            round(metrics_copy["pairs_committed"] / queued, 3) if queued > 0 else 0.0
        )
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Refactoring Extraction Metrics ===")
        self.info(f"Scored: {metrics['pairs_scored']} "
                  f"(incompatible skipped: {metrics['pairs_rejected_incompatible']})")
        self.info(f"Below threshold: {metrics['pairs_below_threshold']}")
        self.info(f"Committed: {metrics['pairs_committed']}/{metrics['pairs_queued']} "
                  f"({metrics['commit_rate'] * 100:.1f}% of queued)")
        if metrics["pairs_conflicting"]:
            self.info(f"Conflicting pairs dropped: {metrics['pairs_conflicting']}")


_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "refmatch",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
