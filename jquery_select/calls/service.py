import logging
from dataclasses import dataclass, field

from jquery_select.calls.patterns import CallPattern, CallPatternSet, PatternKind, build_patterns
from jquery_select.calls.scanner import scan_calls
from jquery_select.calls.views import CallShape, ScriptCall

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
	"""Calls found in a body, with the shape each one matched through."""

	shape: CallShape
	matches: list[tuple[PatternKind, ScriptCall]] = field(default_factory=list)

	@property
	def matched(self) -> bool:
		return bool(self.matches)

	@property
	def calls(self) -> list[ScriptCall]:
		return [call for _, call in self.matches]

	def __bool__(self) -> bool:
		return self.matched


class CallMatcher:
	"""Decides whether a body contains a call of the requested shape.

	The leading-identifier, trailing-identifier and removal shapes are OR-ed: one hit is enough.
	"""

	def __init__(self, shape: CallShape | None = None):
		self.shape = shape or CallShape()
		self.patterns: CallPatternSet = build_patterns(self.shape)

	def match(self, body: str, calls: list[ScriptCall] | None = None) -> MatchResult:
		if calls is None:
			calls = scan_calls(body)
		result = MatchResult(shape=self.shape)
		for call in calls:
			pattern = self._first_matching(call)
			if pattern is not None:
				result.matches.append((pattern.kind, call))

		logger.debug(
			f'{len(result.matches)} of {len(calls)} call(s) match {self.shape.narrowing!r}'
			+ (f' via {sorted({kind.value for kind, _ in result.matches})}' if result.matches else '')
		)
		return result

	def _first_matching(self, call: ScriptCall) -> CallPattern | None:
		for pattern in self.patterns.match_patterns:
			if pattern.matches(call):
				return pattern
		return None
