"""
Selection assertions over jQuery responses.

Narrowing down
	With no narrowing arguments, asserts that one or more jQuery calls are made. ``method``
	narrows to calls of that method, ``option`` to calls passing that option as the first
	argument, ``identifier`` to calls made on that selector.

Using blocks
	Without a block the assertion only checks that a matching call exists. With a block it also
	requires the matching calls to pass JS-escaped HTML; every element fragment in that HTML
	becomes the selection scope for the block. Blocks nest.

	A call must pass a quoted argument, or be ``.remove()``: a bare ``$("#notice").hide();`` is
	not matched.

Examples::

	assertions = JQueryAssertions(response)

	# $("#cart").show("blind", "<p>..</p>"); shows #cart with the blind effect
	assertions.assert_select_jquery(method='show', option='blind', identifier='#cart')

	# #cart content contains a #current_item
	with assertions.select_jquery(method='html', identifier='#cart'):
		assertions.assert_select('#current_item')
"""

import logging
import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, NoReturn

from bs4 import BeautifulSoup, Tag

from jquery_select.calls.scanner import scan_calls
from jquery_select.calls.service import CallMatcher
from jquery_select.calls.views import CallShape, ScriptCall
from jquery_select.config import JQuerySelectConfig
from jquery_select.exceptions import InvalidCallShapeError, SelectionAssertionError
from jquery_select.fragments.service import FragmentExtractor
from jquery_select.scope.service import ScopeManager
from jquery_select.scope.views import SelectionScope
from jquery_select.utils import response_text, short_response_body

logger = logging.getLogger(__name__)

FailFunction = Callable[[str], Any]
ScopeBlock = Callable[[SelectionScope], Any]


def default_fail(message: str) -> NoReturn:
	raise SelectionAssertionError(message)


class JQueryAssertions:
	"""Assertions for one response. Create one per test case; it owns that test's selection scope."""

	def __init__(
		self,
		response: Any,
		config: JQuerySelectConfig | None = None,
		fail: FailFunction | None = None,
	):
		self.response = response
		self.config = config or JQuerySelectConfig()
		self._fail = fail or default_fail
		self._body: str | None = None
		self.scopes = ScopeManager(self._document_scope)

	@property
	def body(self) -> str:
		if self._body is None:
			self._body = response_text(self.response)
		return self._body

	@property
	def scope(self) -> SelectionScope:
		"""Scope nested assertions search when none is passed explicitly."""
		return self.scopes.current

	def fail(self, message: str) -> NoReturn:
		self._fail(message)
		# a failure primitive that returns is treated as failing anyway
		raise SelectionAssertionError(message)

	# ------------------------------------------------------------------
	# jQuery calls
	# ------------------------------------------------------------------

	def assert_select_jquery(
		self,
		shape: CallShape | None = None,
		block: ScopeBlock | None = None,
		*,
		method: str | None = None,
		option: str | None = None,
		identifier: str | None = None,
	) -> None:
		"""Assert that the response makes a matching jQuery call; with ``block``, run it against the fragments."""
		shape = _resolve_shape(shape, method, option, identifier)
		if block is None:
			self._match_or_fail(shape, scan_calls(self.body))
			return
		with self.select_jquery(shape) as scope:
			block(scope)

	@contextmanager
	def select_jquery(
		self,
		shape: CallShape | None = None,
		*,
		method: str | None = None,
		option: str | None = None,
		identifier: str | None = None,
	) -> Iterator[SelectionScope]:
		"""Block form of ``assert_select_jquery``: yields the fragment scope and restores the previous one on exit."""
		shape = _resolve_shape(shape, method, option, identifier)
		calls = scan_calls(self.body)
		self._match_or_fail(shape, calls)

		fragments = FragmentExtractor(shape, self.config).extract(self.body, calls)
		if not fragments:
			self.fail(self._diagnostic(shape))

		with self.scopes.enter(fragments, source=f'jquery {shape.narrowing!r}') as scope:
			yield scope

	def _match_or_fail(self, shape: CallShape, calls: list[ScriptCall]) -> None:
		result = CallMatcher(shape).match(self.body, calls)
		if not result:
			logger.debug(f'No jQuery call matches {shape.narrowing!r}')
			self.fail(self._diagnostic(shape))

	def _diagnostic(self, shape: CallShape) -> str:
		return (
			f'Actual response body: {short_response_body(self.body, self.config)}\n'
			f'Expected JQuery options: {shape.narrowing!r}'
		)

	# ------------------------------------------------------------------
	# Nested selection
	# ------------------------------------------------------------------

	def css_select(self, selector: str, scope: SelectionScope | None = None) -> list[Tag]:
		return (scope if scope is not None else self.scope).select(selector)

	def assert_select(
		self,
		selector: str,
		*,
		count: int | None = None,
		minimum: int | None = None,
		maximum: int | None = None,
		text: str | re.Pattern[str] | None = None,
		block: ScopeBlock | None = None,
		scope: SelectionScope | None = None,
	) -> list[Tag]:
		"""Assert that ``selector`` matches in the current (or given) scope.

		Without bounds at least one element must match. ``count`` fixes both bounds. ``text`` keeps
		only elements whose stripped text equals the string or matches the pattern. With ``block``
		the matched elements become the scope for the block.
		"""
		elements = self.css_select(selector, scope)
		if text is not None:
			elements = [element for element in elements if _text_matches(element, text)]

		if count is not None:
			minimum = maximum = count
		elif minimum is None and maximum is None:
			minimum = 1

		described = f'{selector!r}' + (f' with text {text!r}' if text is not None else '')
		if minimum is not None and len(elements) < minimum:
			self.fail(f'Expected at least {minimum} element(s) matching {described}, found {len(elements)}.')
		if maximum is not None and len(elements) > maximum:
			self.fail(f'Expected at most {maximum} element(s) matching {described}, found {len(elements)}.')

		if block is not None:
			with self.scopes.enter(elements, source=selector) as nested:
				block(nested)
		return elements

	def _document_scope(self) -> SelectionScope:
		document = BeautifulSoup(self.body, self.config.html_parser)
		return SelectionScope(elements=(document,), source='response')


def _resolve_shape(
	shape: CallShape | None,
	method: str | None,
	option: str | None,
	identifier: str | None,
) -> CallShape:
	if shape is not None:
		if method is not None or option is not None or identifier is not None:
			raise InvalidCallShapeError('Pass either a CallShape or method/option/identifier keywords, not both')
		return shape
	return CallShape(method=method, option=option, identifier=identifier)


def _text_matches(element: Tag, text: str | re.Pattern[str]) -> bool:
	content = element.get_text().strip()
	if isinstance(text, re.Pattern):
		return text.search(content) is not None
	return content == text
