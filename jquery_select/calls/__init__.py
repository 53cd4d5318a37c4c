from jquery_select.calls.patterns import CallPattern, CallPatternSet, PatternKind, build_patterns
from jquery_select.calls.scanner import CallScanner, scan_calls
from jquery_select.calls.service import CallMatcher, MatchResult
from jquery_select.calls.views import BareToken, CallShape, ScriptCall, StringLiteral

__all__ = [
	'BareToken',
	'CallMatcher',
	'CallPattern',
	'CallPatternSet',
	'CallScanner',
	'CallShape',
	'MatchResult',
	'PatternKind',
	'ScriptCall',
	'StringLiteral',
	'build_patterns',
	'scan_calls',
]
