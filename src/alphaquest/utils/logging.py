"""Logging utilities for AlphaQuest."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from alphaquest.domain import CoverageResult, LevelKind

_installed_handlers: list[logging.Handler] = []


@dataclass
class EvaluationStats:
    """Statistics from evaluation checks."""

    checks_run: int = 0
    passed_count: int = 0
    failed_count: int = 0
    retries: int = 0
    last_percentage: dict[str, float] = field(default_factory=dict)

    @property
    def pass_rate(self) -> float:
        """Share of checks that passed, in percent."""
        if self.checks_run == 0:
            return 0.0
        return self.passed_count / self.checks_run * 100.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls replace the handlers installed by the previous call
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("alphaquest")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class EvaluationLogger:
    """Logger for tracking level checks and their statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("alphaquest")
        self._stats = EvaluationStats()

    def log_geometry_scaled(self, level: LevelKind, width: float, height: float, empty: bool) -> None:
        """Log that a level's geometry was (re)fitted to the canvas."""
        self._logger.debug(
            "Geometry scaled",
            level=level.value,
            width=width,
            height=height,
            empty=empty,
        )

    def log_check(
        self,
        level: LevelKind,
        result: CoverageResult,
        threshold: float,
        passed: bool,
    ) -> None:
        """Log the outcome of a check action."""
        self._logger.info(
            "Level checked",
            level=level.value,
            percentage=round(result.percentage, 2),
            tested=result.tested_count,
            covered=result.covered_count,
            threshold=threshold,
            passed=passed,
        )
        self._stats.checks_run += 1
        if passed:
            self._stats.passed_count += 1
        else:
            self._stats.failed_count += 1
        self._stats.last_percentage[level.value] = result.percentage

    def log_retry(self, level: LevelKind) -> None:
        """Log that an attempt was reset."""
        self._logger.debug("Attempt reset", level=level.value)
        self._stats.retries += 1

    def log_input_ignored(self, level: LevelKind, state: str) -> None:
        """Log input received while the attempt is not accepting strokes."""
        self._logger.debug("Input ignored", level=level.value, state=state)

    @property
    def stats(self) -> EvaluationStats:
        """Get current evaluation statistics."""
        return self._stats
