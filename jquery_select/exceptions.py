class JQuerySelectError(Exception):
	"""Base class for all jquery_select errors"""


class SelectionAssertionError(JQuerySelectError, AssertionError):
	"""Raised by the default failure primitive when an assertion does not hold"""

	def __init__(self, message: str):
		self.message = message
		super().__init__(message)


class InvalidCallShapeError(JQuerySelectError, ValueError):
	"""Raised when narrowing arguments are given in conflicting ways"""
