"""Tests for call patterns and the call matcher."""

import itertools

import pytest
from pydantic import ValidationError

from jquery_select.calls.patterns import PatternKind, build_patterns
from jquery_select.calls.scanner import scan_calls
from jquery_select.calls.service import CallMatcher
from jquery_select.calls.views import CallShape

SAMPLE_BODY = '\n'.join(
	[
		r'$("#cart").html("<div id=\"current_item\">Book<\/div>");',
		r'$("#cart").show("blind", "<p>shown<\/p>");',
		r'jQuery("#notice").hide("");',
		r'$("<li>new<\/li>").appendTo("#list");',
		r'$("#cart").remove();',
		r'$("#other").remove();',
		r"$('#single').html('<p>single quoted</p>');",
		r'$("#cart").fadeIn("slow", 400, "<p>x<\/p>");',
		r'$("#a").text("plain");',
	]
)


def _matching_indices(shape: CallShape, calls) -> set[int]:
	result = CallMatcher(shape).match('', calls)
	return {calls.index(call) for call in result.calls}


class TestCallShape:
	def test_defaults_are_unconstrained(self):
		shape = CallShape()
		assert shape.method is None and shape.option is None and shape.identifier is None
		assert shape.narrowing == []

	def test_narrowing_order(self):
		shape = CallShape(identifier='#cart', option='blind', method='show')
		assert shape.narrowing == ['show', 'blind', '#cart']

	def test_rejects_non_word_method(self):
		with pytest.raises(ValidationError):
			CallShape(method='html()')

	@pytest.mark.parametrize('identifier', ['', '<div>', 'a\\b', '#cart <b>'])
	def test_rejects_bad_identifier(self, identifier):
		with pytest.raises(ValidationError):
			CallShape(identifier=identifier)

	def test_accepts_compound_selectors(self):
		assert CallShape(identifier='#cart > li.item').identifier == '#cart > li.item'

	@pytest.mark.parametrize('identifier', ["input[name='q']", 'a[title="x"]'])
	def test_accepts_attribute_selectors_with_quotes(self, identifier):
		assert CallShape(identifier=identifier).identifier == identifier

	def test_is_hashable(self):
		assert build_patterns(CallShape(method='html')) is build_patterns(CallShape(method='html'))


class TestCallPatterns:
	def setup_method(self):
		self.calls = scan_calls(SAMPLE_BODY)

	def test_sample_body_scans(self):
		assert len(self.calls) == 9

	def test_leading_identifier(self):
		patterns = build_patterns(CallShape(identifier='#cart'))
		matched = [i for i, call in enumerate(self.calls) if patterns.leading_identifier.matches(call)]
		assert matched == [0, 1]

	def test_leading_identifier_with_method(self):
		patterns = build_patterns(CallShape(method='html'))
		matched = [i for i, call in enumerate(self.calls) if patterns.leading_identifier.matches(call)]
		# single quoted payloads are not escaped HTML literals
		assert matched == [0]

	def test_trailing_identifier(self):
		patterns = build_patterns(CallShape(identifier='#list'))
		matched = [i for i, call in enumerate(self.calls) if patterns.trailing_identifier.matches(call)]
		assert matched == [3]

	def test_removal(self):
		patterns = build_patterns(CallShape(identifier='#cart'))
		matched = [i for i, call in enumerate(self.calls) if patterns.removal.matches(call)]
		assert matched == [4]

	def test_removal_ignores_other_methods_and_options(self):
		call = self.calls[4]
		assert not build_patterns(CallShape(method='html', identifier='#cart')).removal.matches(call)
		assert not build_patterns(CallShape(option='blind', identifier='#cart')).removal.matches(call)
		assert build_patterns(CallShape(method='remove', identifier='#cart')).removal.matches(call)

	def test_option_must_be_first_argument(self):
		blind = build_patterns(CallShape(option='blind'))
		fade = build_patterns(CallShape(option='fade'))
		assert blind.leading_identifier.matches(self.calls[1])
		assert not fade.leading_identifier.matches(self.calls[1])
		assert not blind.leading_identifier.matches(self.calls[0])

	def test_more_than_one_leading_argument_never_matches(self):
		patterns = build_patterns(CallShape())
		assert not any(pattern.matches(self.calls[7]) for pattern in patterns.match_patterns)

	def test_capture_payloads(self):
		capture = build_patterns(CallShape()).capture
		payloads = [payload for call in self.calls for payload in capture.payloads(call)]
		assert payloads == [
			r'<div id=\"current_item\">Book<\/div>',
			r'<p>shown<\/p>',
			r'<li>new<\/li>',
		]

	def test_capture_with_identifier(self):
		capture = build_patterns(CallShape(identifier='#list')).capture
		payloads = [payload for call in self.calls for payload in capture.payloads(call)]
		assert payloads == [r'<li>new<\/li>']

	def test_capture_skips_plain_text(self):
		capture = build_patterns(CallShape()).capture
		assert capture.payloads(self.calls[8]) == []


class TestCallMatcher:
	def test_matches_any_shape(self):
		result = CallMatcher(CallShape(identifier='#cart')).match(SAMPLE_BODY)
		assert result
		assert [kind for kind, _ in result.matches] == [
			PatternKind.LEADING_IDENTIFIER,
			PatternKind.LEADING_IDENTIFIER,
			PatternKind.REMOVAL,
		]

	def test_removal_alone_is_enough(self):
		assert CallMatcher(CallShape(identifier='#cart')).match('$("#cart").remove();').matched

	def test_no_calls(self):
		result = CallMatcher().match('alert("hello");')
		assert not result
		assert result.calls == []

	def test_unknown_identifier(self):
		assert not CallMatcher(CallShape(identifier='#missing')).match(SAMPLE_BODY)

	def test_payload_wrapped_in_escaped_quotes_matches_unconstrained(self):
		assert CallMatcher().match(r'$("#cart").show("\"<div>ok</div>\"");')

	def test_dropping_an_argument_never_narrows(self):
		calls = scan_calls(SAMPLE_BODY)
		methods = [None, 'html', 'show', 'remove', 'appendTo', 'hide']
		options = [None, 'blind', 'slow']
		identifiers = [None, '#cart', '#list', '#notice']

		for method, option, identifier in itertools.product(methods, options, identifiers):
			shape = CallShape(method=method, option=option, identifier=identifier)
			narrow = _matching_indices(shape, calls)
			for name in ('method', 'option', 'identifier'):
				broader = shape.model_copy(update={name: None})
				assert narrow <= _matching_indices(broader, calls), (shape, name)

	def test_receiver_with_other_quote_kind_is_a_selector(self):
		body = '\n'.join(
			[
				r'''$("input[name='q']").html("<b>x<\/b>");''',
				r"""$('a[title="x"]').html("<i>y<\/i>");""",
			]
		)

		result = CallMatcher().match(body)

		assert [kind for kind, _ in result.matches] == [PatternKind.LEADING_IDENTIFIER, PatternKind.LEADING_IDENTIFIER]

	def test_identifier_with_quotes_narrows(self):
		body = r'''$("input[name='q']").html("<b>x<\/b>"); $("#cart").html("<p>y<\/p>");'''

		result = CallMatcher(CallShape(identifier="input[name='q']")).match(body)

		assert [call.receiver.body for call in result.calls] == ["input[name='q']"]

	def test_call_without_arguments_is_only_matched_as_removal(self):
		assert not CallMatcher(CallShape(method='hide', identifier='#notice')).match('$("#notice").hide();')
		assert CallMatcher(CallShape(method='hide', identifier='#notice')).match('$("#notice").hide("");')
