import logging
import time
from functools import wraps
from typing import Any, Callable, ParamSpec, TypeVar

from jquery_select.config import JQuerySelectConfig

logger = logging.getLogger(__name__)


# Define generic type variables for return type and parameters
R = TypeVar('R')
P = ParamSpec('P')


def time_execution_sync(additional_text: str = '') -> Callable[[Callable[P, R]], Callable[P, R]]:
	def decorator(func: Callable[P, R]) -> Callable[P, R]:
		@wraps(func)
		def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
			start_time = time.time()
			result = func(*args, **kwargs)
			execution_time = time.time() - start_time
			logger.debug(f'{additional_text} Execution time: {execution_time:.4f} seconds')
			return result

		return wrapper

	return decorator


def response_text(response: Any) -> str:
	"""Return the body text of a response.

	Accepts plain text, raw bytes, objects with a ``text`` attribute (httpx, requests)
	and objects that only expose ``content`` bytes (Django's HttpResponse).
	"""
	if isinstance(response, str):
		return response
	if isinstance(response, (bytes, bytearray)):
		return bytes(response).decode('utf-8', errors='replace')

	text = getattr(response, 'text', None)
	if isinstance(text, str):
		return text

	content = getattr(response, 'content', None)
	if isinstance(content, (bytes, bytearray)):
		charset = getattr(response, 'charset', None) or 'utf-8'
		return bytes(content).decode(charset, errors='replace')
	if isinstance(content, str):
		return content

	raise TypeError(f'Cannot read a response body from {type(response).__name__}')


def short_response_body(body: str, config: JQuerySelectConfig | None = None) -> str:
	"""Shorten a body for failure messages: head, marker, tail."""
	config = config or JQuerySelectConfig()
	if len(body) <= config.body_preview_limit:
		return body
	edge = config.body_preview_edge
	# overlapping head and tail would make the preview no shorter than the body
	if len(body) <= 2 * edge + len(config.body_preview_marker):
		return body
	head = body[:edge]
	tail = body[-edge:] if edge else ''
	return f'{head}{config.body_preview_marker}{tail}'
