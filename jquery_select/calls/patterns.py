"""
Call patterns built from a CallShape.

Each pattern is a predicate over a scanned ScriptCall. Four are built per shape:

- leading identifier: ``$("#cart").html("<p>..</p>");`` receiver is the selector, payload is the argument
- trailing identifier: ``$("<p>..</p>").appendTo("#cart");`` payload is the receiver, selector is the argument
- removal: ``$("#cart").remove();`` no payload at all
- capture: the selector in either position and a payload in the other; payloads are collected for extraction
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from jquery_select.calls.views import SELECTOR_TOKEN_RE, WORD_TOKEN_RE, BareToken, CallShape, ScriptCall, StringLiteral

REMOVE_METHOD = 'remove'


class PatternKind(str, Enum):
	LEADING_IDENTIFIER = 'leading_identifier'
	TRAILING_IDENTIFIER = 'trailing_identifier'
	REMOVAL = 'removal'
	CAPTURE = 'capture'


@dataclass(frozen=True)
class CallPattern:
	kind: PatternKind
	shape: CallShape

	def matches(self, call: ScriptCall) -> bool:
		if self.kind is PatternKind.REMOVAL:
			return self._matches_removal(call)

		if not self._method_matches(call) or not self._option_matches(call):
			return False
		subject = call.subject
		if subject is None:
			return False

		if self.kind is PatternKind.LEADING_IDENTIFIER:
			return self._fills_identifier(call.receiver) and _is_escaped_html(subject)
		if self.kind is PatternKind.TRAILING_IDENTIFIER:
			return _is_escaped_html(call.receiver) and self._fills_identifier(subject)
		# capture: the selector on one side, escaped HTML on the other
		return (self._fills_identifier(call.receiver) and _is_escaped_html(subject)) or (
			_is_escaped_html(call.receiver) and self._fills_identifier(subject)
		)

	def payloads(self, call: ScriptCall) -> list[str]:
		"""Escaped payloads carried by ``call``, receiver first. Empty unless the call matches."""
		if not self.matches(call):
			return []
		operands = [call.receiver]
		if call.subject is not None:
			operands.append(call.subject)
		return [
			operand.body
			for operand in operands
			if _is_escaped_html(operand) and operand.body and not self._fills_identifier(operand)
		]

	# ------------------------------------------------------------------
	# Slots
	# ------------------------------------------------------------------

	def _fills_identifier(self, operand: StringLiteral | BareToken) -> bool:
		if not isinstance(operand, StringLiteral):
			return False
		# the literal's own quote can only appear escaped; the other quote is ordinary selector text
		if operand.quote in operand.body:
			return False
		if self.shape.identifier is not None:
			return operand.body == self.shape.identifier
		return SELECTOR_TOKEN_RE.fullmatch(operand.body) is not None

	def _method_matches(self, call: ScriptCall) -> bool:
		return self.shape.method is None or call.method == self.shape.method

	def _option_matches(self, call: ScriptCall) -> bool:
		leading = call.leading_arguments
		if self.shape.option is not None:
			return len(leading) == 1 and _token_text(leading[0]) == self.shape.option
		# unconstrained: at most one leading option of any word token
		return not leading or (len(leading) == 1 and WORD_TOKEN_RE.fullmatch(_token_text(leading[0])) is not None)

	def _matches_removal(self, call: ScriptCall) -> bool:
		if self.shape.option is not None or self.shape.method not in (None, REMOVE_METHOD):
			return False
		return call.method == REMOVE_METHOD and not call.arguments and self._fills_identifier(call.receiver)


@dataclass(frozen=True)
class CallPatternSet:
	"""All patterns for one shape."""

	shape: CallShape
	leading_identifier: CallPattern
	trailing_identifier: CallPattern
	removal: CallPattern
	capture: CallPattern

	@property
	def match_patterns(self) -> tuple[CallPattern, ...]:
		"""Patterns whose union decides whether an assertion passes."""
		return (self.leading_identifier, self.trailing_identifier, self.removal)


@lru_cache(maxsize=128)
def build_patterns(shape: CallShape) -> CallPatternSet:
	return CallPatternSet(
		shape=shape,
		leading_identifier=CallPattern(PatternKind.LEADING_IDENTIFIER, shape),
		trailing_identifier=CallPattern(PatternKind.TRAILING_IDENTIFIER, shape),
		removal=CallPattern(PatternKind.REMOVAL, shape),
		capture=CallPattern(PatternKind.CAPTURE, shape),
	)


def _is_escaped_html(operand: StringLiteral | BareToken) -> bool:
	return isinstance(operand, StringLiteral) and operand.is_escaped_html


def _token_text(operand: StringLiteral | BareToken) -> str:
	return operand.body if isinstance(operand, StringLiteral) else operand.text
