"""Project logging setup.

Provides a single `get_logger(name=None)` factory that returns a logger under
the `structure-engine` namespace. Configuration uses the standard library only:
a console `StreamHandler` and, when `LOGS_DIR` is set, a date-based file
handler writing to `LOGS_DIR/engine_YYYY-MM-DD.log`.

Behavior:
- Log level is taken from the environment variable `LOG_LEVEL` (default INFO).
- Only the package logger is configured; the host application's root logger
  is left untouched.
- The file handler switches to a new file at midnight.
"""
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAMESPACE = "structure-engine"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class DailyFileHandler(logging.Handler):
	"""Handler that writes to one file per day and switches files at midnight."""

	def __init__(self, logs_dir: str, prefix: str = "engine"):
		super().__init__()
		self.logs_dir = Path(logs_dir)
		self.prefix = prefix
		self.current_date = datetime.now().strftime("%Y-%m-%d")
		self.current_handler: Optional[logging.FileHandler] = None
		self._open_for_current_date()

	def _open_for_current_date(self):
		if self.current_handler:
			self.current_handler.close()

		log_file = self.logs_dir / f"{self.prefix}_{self.current_date}.log"
		self.current_handler = logging.FileHandler(str(log_file), encoding="utf-8")
		if self.formatter:
			self.current_handler.setFormatter(self.formatter)

	def setFormatter(self, fmt):
		super().setFormatter(fmt)
		if self.current_handler:
			self.current_handler.setFormatter(fmt)

	def emit(self, record):
		try:
			today = datetime.now().strftime("%Y-%m-%d")
			if today != self.current_date:
				self.current_date = today
				self._open_for_current_date()

			if self.current_handler:
				self.current_handler.emit(record)
		except Exception:
			self.handleError(record)

	def close(self):
		if self.current_handler:
			self.current_handler.close()
		super().close()


def _resolve_level() -> int:
	level_name = os.getenv("LOG_LEVEL", "INFO").upper()
	level = getattr(logging, level_name, None)
	return level if isinstance(level, int) else logging.INFO


def _configure_package_logger(log_level: int, logs_dir: Optional[str]) -> None:
	package_logger = logging.getLogger(LOGGER_NAMESPACE)
	if package_logger.handlers:
		# already configured
		return

	package_logger.setLevel(log_level)
	formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

	console_h = logging.StreamHandler()
	console_h.setFormatter(formatter)
	package_logger.addHandler(console_h)

	if logs_dir:
		try:
			os.makedirs(logs_dir, exist_ok=True)
			file_h = DailyFileHandler(logs_dir)
			file_h.setFormatter(formatter)
			package_logger.addHandler(file_h)
		except OSError:
			# If the directory is not writable, keep console output only.
			package_logger.warning("Cannot write logs to %s, using console only", logs_dir)


def get_logger(name: Optional[str] = None) -> logging.Logger:
	"""Return a configured logger for `name`.

	Example:
		from structure_engine.core.logger import get_logger
		log = get_logger(__name__)
		log.debug("analysis started")

	Module names are nested under the `structure-engine` namespace so that a
	single configuration covers the whole package. The configuration runs once
	on the first call.
	"""
	_configure_package_logger(_resolve_level(), os.getenv("LOGS_DIR"))

	if not name:
		return logging.getLogger(LOGGER_NAMESPACE)
	return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


__all__ = ["get_logger", "DailyFileHandler", "LOGGER_NAMESPACE"]
