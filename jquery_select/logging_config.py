import logging
import os

from dotenv import load_dotenv

load_dotenv()

_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str | int | None = None) -> logging.Logger:
	"""Attach a stream handler to the jquery_select logger.

	The level defaults to JQUERY_SELECT_LOGGING_LEVEL (``info`` when unset). Calling this
	more than once does not stack handlers.
	"""
	if level is None:
		level = os.getenv('JQUERY_SELECT_LOGGING_LEVEL', 'info')
	if isinstance(level, str):
		level = logging.getLevelName(level.upper())
		if not isinstance(level, int):
			level = logging.INFO

	package_logger = logging.getLogger('jquery_select')
	package_logger.setLevel(level)

	if not any(getattr(handler, '_jquery_select', False) for handler in package_logger.handlers):
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter(_LOG_FORMAT))
		handler._jquery_select = True  # type: ignore[attr-defined]
		package_logger.addHandler(handler)

	return package_logger
