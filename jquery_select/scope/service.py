import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

from bs4 import Tag

from jquery_select.scope.views import SelectionScope

logger = logging.getLogger(__name__)


class ScopeManager:
	"""Stack of selection scopes above a lazily built root scope.

	``enter`` swaps in a new scope for the duration of a block and restores the previous one on
	every exit path. One manager belongs to one test case.
	"""

	def __init__(self, root_factory: Callable[[], SelectionScope]):
		self._root_factory = root_factory
		self._root: SelectionScope | None = None
		self._stack: list[SelectionScope] = []

	@property
	def root(self) -> SelectionScope:
		if self._root is None:
			self._root = self._root_factory()
		return self._root

	@property
	def current(self) -> SelectionScope:
		return self._stack[-1] if self._stack else self.root

	@property
	def depth(self) -> int:
		return len(self._stack)

	@contextmanager
	def enter(self, elements: Iterable[Tag], source: str) -> Iterator[SelectionScope]:
		saved_depth = len(self._stack)
		scope = SelectionScope(elements=tuple(elements), parent=self.current, source=source)
		self._stack.append(scope)
		logger.debug(f'Entered scope {source!r} with {len(scope)} element(s) at depth {len(self._stack)}')
		try:
			yield scope
		finally:
			if len(self._stack) != saved_depth + 1 or self._stack[-1] is not scope:
				logger.warning(f'Scope {source!r} exited out of order, restoring depth {saved_depth}')
			del self._stack[saved_depth:]
			logger.debug(f'Left scope {source!r}, back at depth {saved_depth}')

	def reset(self) -> None:
		"""Drop every pushed scope and the cached root."""
		self._stack.clear()
		self._root = None
