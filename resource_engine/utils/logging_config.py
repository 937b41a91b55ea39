# ABOUTME: Debug logging configuration for dual console/file output
# ABOUTME: Manages log file rotation, timestamps, and Rich console integration

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO
from rich.console import Console


LOG_FILE_PREFIX = "resource_engine_"


class TeeFile:
    """
    File-like object that writes to both stdout and a log file.

    Lets a Rich console show reports in the terminal while the same text
    lands in the debug log.
    """

    def __init__(self, file: TextIO, stdout: TextIO):
        self.file = file
        self.stdout = stdout

    def write(self, text: str) -> int:
        self.stdout.write(text)
        self.file.write(text)
        return len(text)

    def flush(self) -> None:
        self.stdout.flush()
        self.file.flush()

    def isatty(self) -> bool:
        return self.stdout.isatty()


class LoggingConfig:
    """
    Manages debug logging for the resource engine.

    Responsibilities:
    - Create the log directory
    - Generate timestamped log files
    - Rotate old log files (keep last 10)
    - Attach a file handler to Python logging
    - Create a dual-output Rich console
    """

    def __init__(self, debug_enabled: bool = False, log_dir: str = "logs"):
        """
        Initialize logging configuration.

        Args:
            debug_enabled: Whether debug mode is enabled
            log_dir: Directory that receives log files
        """
        self.debug_enabled = debug_enabled
        self.log_dir = Path(log_dir)
        self.log_file_path: Optional[Path] = None
        self.log_file: Optional[TextIO] = None
        self.file_handler: Optional[logging.FileHandler] = None
        self.tee_console: Optional[Console] = None
        self._event_counter = 0

        if debug_enabled:
            self._setup_logging()

    def _setup_logging(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file_path = self.log_dir / f"{LOG_FILE_PREFIX}{timestamp}.log"

        self._rotate_logs(self.log_dir)

        self.log_file = open(self.log_file_path, 'w', encoding='utf-8', buffering=1)
        self._setup_python_logging()

    def _rotate_logs(self, log_dir: Path, keep_count: int = 10) -> None:
        """
        Delete old log files, keeping room for the one about to be created.

        Args:
            log_dir: Directory containing log files
            keep_count: Number of log files to keep
        """
        newest_first = sorted(
            log_dir.glob(f"{LOG_FILE_PREFIX}*.log"),
            key=lambda p: p.stat().st_mtime,
            reverse=True
        )
        stale = newest_first[max(0, keep_count - 1):]

        for path in stale:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logging.getLogger(__name__).warning(f"Could not rotate out {path.name}: {e}")

    def _setup_python_logging(self) -> None:
        logger = logging.getLogger()
        logger.setLevel(logging.DEBUG if self.debug_enabled else logging.INFO)

        if self.log_file_path:
            self.file_handler = logging.FileHandler(self.log_file_path, encoding="utf-8")
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(logging.Formatter(
                '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(self.file_handler)

    def create_console(self) -> Console:
        """
        Create a Rich console that optionally writes to the log file.

        Returns:
            Rich Console instance
        """
        if self.debug_enabled and self.log_file:
            self.tee_console = Console(
                file=TeeFile(self.log_file, sys.stdout),
                force_terminal=True,
                legacy_windows=False
            )
            return self.tee_console
        return Console()

    def log_event(self, event_type: str, data: dict) -> None:
        """
        Log a resource event with metadata.

        Args:
            event_type: Type of event (e.g., "COST_APPLIED")
            data: Event data dictionary
        """
        if not self.debug_enabled:
            return

        self._event_counter += 1
        data_str = ", ".join(f"{k}={v}" for k, v in data.items())
        logging.getLogger("resource_engine.events").info(
            f"[EVENT #{self._event_counter:03d}] {event_type}: {{{data_str}}}"
        )

    def log_decision(self, resource: str, decision: str, details: str = "") -> None:
        """
        Log a planning decision made for a resource.

        Args:
            resource: Resource description (e.g., "life: 8/40")
            decision: Decision taken (e.g., "RECOVER_IMMEDIATELY")
            details: Optional extra context
        """
        if not self.debug_enabled:
            return

        msg = f"[DECISION] {resource}: {decision}"
        if details:
            msg += f" ({details})"
        logging.getLogger("resource_engine.decisions").info(msg)

    def get_log_file_path(self) -> Optional[Path]:
        return self.log_file_path

    def close(self) -> None:
        """Detach the root file handler and close the log file."""
        if self.file_handler:
            logging.getLogger().removeHandler(self.file_handler)
            self.file_handler.close()
            self.file_handler = None
        if self.log_file:
            self.log_file.close()
            self.log_file = None


# Global logging config instance
_logging_config: Optional[LoggingConfig] = None


def init_logging(debug_enabled: bool = False, log_dir: str = "logs") -> LoggingConfig:
    """
    Initialize global logging configuration.

    Args:
        debug_enabled: Whether debug mode is enabled
        log_dir: Directory that receives log files

    Returns:
        LoggingConfig instance
    """
    global _logging_config
    _logging_config = LoggingConfig(debug_enabled, log_dir)
    return _logging_config


def get_logging_config() -> Optional[LoggingConfig]:
    """Get the global logging configuration, or None if not initialized"""
    return _logging_config
