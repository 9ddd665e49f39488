"""
Logging configuration for applications embedding typescale

The library only creates module loggers; nothing is configured on import.
Hosts that want typescale output call LoggingConfig.setup_logging().

Features:
- Colored console output on TTYs
- Optional rotating file handler
- Old logs cleanup
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime, timedelta
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',  # Cyan
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class LoggingConfig:
    """Centralized logging configuration"""

    LOGGER_NAME = "typescale"
    DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
    DEFAULT_BACKUP_COUNT = 3

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_dir: Optional[str] = None,
            enable_console: bool = True,
            enable_colors: bool = True,
    ) -> logging.Logger:
        """Attach handlers to the 'typescale' logger and return it"""
        if log_level is None:
            from typescale.core.config import get_log_level
            log_level = get_log_level()

        logger = logging.getLogger(LoggingConfig.LOGGER_NAME)
        logger.setLevel(getattr(logging, log_level.upper()))
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        detailed_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if enable_console and sys.stdout is not None:
            console_handler = logging.StreamHandler(sys.stdout)

            is_tty = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    '%(asctime)s - %(levelname)s - %(name)s: %(message)s',
                    datefmt='%H:%M:%S'
                ))
            else:
                console_handler.setFormatter(detailed_format)

            logger.addHandler(console_handler)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(exist_ok=True, parents=True)
            log_file = log_path / f"typescale_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
                backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_format)
            logger.addHandler(file_handler)

        logger.debug("Logging initialized.")
        return logger

    @staticmethod
    def cleanup_old_logs(log_dir: str, days_to_keep: int = 30) -> int:
        """Delete log files older than days_to_keep; return how many went"""
        log_path = Path(log_dir)
        if not log_path.exists():
            return 0

        cutoff_date = datetime.now() - timedelta(days=days_to_keep)
        deleted_count = 0

        for log_file in log_path.glob("typescale_*.log*"):
            try:
                file_time = datetime.fromtimestamp(log_file.stat().st_mtime)
                if file_time < cutoff_date:
                    log_file.unlink()
                    deleted_count += 1
            except OSError as exc:
                logging.getLogger(__name__).warning(f"Could not remove {log_file}: {exc}")

        return deleted_count
