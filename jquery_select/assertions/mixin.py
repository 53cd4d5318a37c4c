from typing import Any

from jquery_select.assertions.service import JQueryAssertions
from jquery_select.config import JQuerySelectConfig


class JQuerySelectTestMixin:
	"""Adds jQuery selection assertions to a ``unittest.TestCase`` that sets ``self.response``.

	Failures go through ``TestCase.fail`` so they are reported as ordinary test failures.
	"""

	response: Any = None
	jquery_select_config: JQuerySelectConfig | None = None

	@property
	def jquery_assertions(self) -> JQueryAssertions:
		assertions: JQueryAssertions | None = getattr(self, '_jquery_assertions', None)
		if assertions is None or assertions.response is not self.response:
			if self.response is None:
				raise AttributeError(f'{type(self).__name__}.response must be set before using selection assertions')
			assertions = JQueryAssertions(self.response, config=self.jquery_select_config, fail=self.fail)  # type: ignore[attr-defined]
			self._jquery_assertions = assertions
		return assertions

	def assert_select_jquery(self, *args, **kwargs) -> None:
		self.jquery_assertions.assert_select_jquery(*args, **kwargs)

	def select_jquery(self, *args, **kwargs):
		return self.jquery_assertions.select_jquery(*args, **kwargs)

	def assert_select(self, selector: str, **kwargs):
		return self.jquery_assertions.assert_select(selector, **kwargs)

	def css_select(self, selector: str, scope=None):
		return self.jquery_assertions.css_select(selector, scope)
