from jquery_select.assertions.mixin import JQuerySelectTestMixin
from jquery_select.assertions.service import JQueryAssertions, default_fail

__all__ = ['JQueryAssertions', 'JQuerySelectTestMixin', 'default_fail']
