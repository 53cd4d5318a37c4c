from jquery_select.assertions.mixin import JQuerySelectTestMixin
from jquery_select.assertions.service import JQueryAssertions
from jquery_select.calls.views import CallShape
from jquery_select.config import JQuerySelectConfig
from jquery_select.exceptions import InvalidCallShapeError, JQuerySelectError, SelectionAssertionError
from jquery_select.fragments.unescape import unescape_js
from jquery_select.logging_config import setup_logging
from jquery_select.scope.views import SelectionScope

__all__ = [
	'CallShape',
	'InvalidCallShapeError',
	'JQueryAssertions',
	'JQuerySelectConfig',
	'JQuerySelectError',
	'JQuerySelectTestMixin',
	'SelectionAssertionError',
	'SelectionScope',
	'setup_logging',
	'unescape_js',
]
