"""
Finite-state scanner for jQuery call statements embedded in response text.

Recognises statements of the form::

	PREFIX ( LITERAL ) . METHOD ( [ARG {, ARG}] ) ;

where PREFIX is ``$`` or ``jQuery``, LITERAL is a single or double quoted JS
string and ARG is a quoted string or a bare word token. Whitespace is allowed
inside the argument list and before the closing semicolon. Anything that does
not fit is skipped; the scan resumes just after the failed prefix.
"""

import logging
import re
from collections.abc import Iterator

from jquery_select.calls.views import BareToken, ScriptCall, StringLiteral

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r'(?<![\w$])(jQuery|\$)\(')
_METHOD_RE = re.compile(r'\w+')
_BARE_RE = re.compile(r'[\w.$+-]+')
_QUOTES = ('"', "'")


class CallScanner:
	"""Scans ``text`` left to right and yields every well-formed call."""

	def __init__(self, text: str):
		self.text = text
		self.pos = 0

	def __iter__(self) -> Iterator[ScriptCall]:
		search_from = 0
		while True:
			prefix_match = _PREFIX_RE.search(self.text, search_from)
			if prefix_match is None:
				return
			self.pos = prefix_match.end()
			call = self._read_call(prefix_match.group(1), prefix_match.start())
			if call is None:
				search_from = prefix_match.start() + 1
				continue
			yield call
			search_from = call.end

	# ------------------------------------------------------------------
	# States
	# ------------------------------------------------------------------

	def _read_call(self, prefix: str, start: int) -> ScriptCall | None:
		self._skip_whitespace()
		receiver = self._read_literal()
		if receiver is None:
			return None
		self._skip_whitespace()
		if not self._expect(')') or not self._expect('.'):
			return None
		method = self._read_pattern(_METHOD_RE)
		if method is None or not self._expect('('):
			return None
		arguments = self._read_arguments()
		if arguments is None:
			return None
		self._skip_whitespace()
		if not self._expect(';'):
			return None
		return ScriptCall(
			prefix=prefix,
			receiver=receiver,
			method=method,
			arguments=tuple(arguments),
			start=start,
			end=self.pos,
		)

	def _read_arguments(self) -> list[StringLiteral | BareToken] | None:
		arguments: list[StringLiteral | BareToken] = []
		self._skip_whitespace()
		if self._expect(')'):
			return arguments
		while True:
			self._skip_whitespace()
			argument = self._read_argument()
			if argument is None:
				return None
			arguments.append(argument)
			self._skip_whitespace()
			if self._expect(','):
				continue
			if self._expect(')'):
				return arguments
			return None

	def _read_argument(self) -> StringLiteral | BareToken | None:
		literal = self._read_literal()
		if literal is not None:
			return literal
		start = self.pos
		text = self._read_pattern(_BARE_RE)
		if text is None:
			return None
		return BareToken(text=text, start=start, end=self.pos)

	def _read_literal(self) -> StringLiteral | None:
		if self.pos >= len(self.text) or self.text[self.pos] not in _QUOTES:
			return None
		quote = self.text[self.pos]
		start = self.pos
		i = self.pos + 1
		while i < len(self.text):
			char = self.text[i]
			if char == '\\':
				# escape pair, including an escaped quote
				i += 2
				continue
			if char == quote:
				self.pos = i + 1
				return StringLiteral(quote=quote, body=self.text[start + 1 : i], start=start, end=self.pos)
			i += 1
		return None

	# ------------------------------------------------------------------
	# Primitives
	# ------------------------------------------------------------------

	def _expect(self, char: str) -> bool:
		if self.text.startswith(char, self.pos):
			self.pos += len(char)
			return True
		return False

	def _read_pattern(self, pattern: re.Pattern[str]) -> str | None:
		match = pattern.match(self.text, self.pos)
		if match is None:
			return None
		self.pos = match.end()
		return match.group(0)

	def _skip_whitespace(self) -> None:
		while self.pos < len(self.text) and self.text[self.pos].isspace():
			self.pos += 1


def scan_calls(text: str) -> list[ScriptCall]:
	"""Return every well-formed call in ``text``, in order of appearance."""
	calls = list(CallScanner(text))
	logger.debug(f'Scanned {len(calls)} jQuery call(s) in {len(text)} chars')
	return calls
