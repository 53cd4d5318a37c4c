"""Data models for scanned script calls and the shapes they are matched against"""

import re
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field, field_validator

WORD_TOKEN_RE = re.compile(r'\w+')
# Selectors never contain a backslash or an opening angle bracket; HTML payloads do.
SELECTOR_TOKEN_RE = re.compile(r'[^\\<]+')


class CallShape(BaseModel):
	"""Narrowing arguments for a jQuery call assertion. ``None`` leaves a slot unconstrained."""

	model_config = ConfigDict(extra='forbid', frozen=True)

	method: str | None = Field(default=None, description='Method invoked on the selection, e.g. "html" or "hide".')
	option: str | None = Field(default=None, description='Option passed as the first argument, e.g. "blind".')
	identifier: str | None = Field(default=None, description='Selector the call is made on, e.g. "#cart".')

	@field_validator('method', 'option')
	@classmethod
	def validate_word_token(cls, value: str | None) -> str | None:
		if value is not None and not WORD_TOKEN_RE.fullmatch(value):
			raise ValueError(f'expected a word token, got {value!r}')
		return value

	@field_validator('identifier')
	@classmethod
	def validate_selector_token(cls, value: str | None) -> str | None:
		if value is not None and not SELECTOR_TOKEN_RE.fullmatch(value):
			raise ValueError(f'identifier must be a non-empty selector without backslashes or "<", got {value!r}')
		return value

	@property
	def narrowing(self) -> list[str]:
		"""Supplied narrowing arguments in method, option, identifier order."""
		return [value for value in (self.method, self.option, self.identifier) if value is not None]


@dataclass(frozen=True)
class StringLiteral:
	"""A quoted JS string as it appears in the source; ``body`` is still escaped."""

	quote: str
	body: str
	start: int
	end: int

	@property
	def is_escaped_html(self) -> bool:
		return self.quote == '"'


@dataclass(frozen=True)
class BareToken:
	"""An unquoted argument such as ``1000`` or ``true``."""

	text: str
	start: int
	end: int


@dataclass(frozen=True)
class ScriptCall:
	"""One ``PREFIX("receiver").method(args);`` statement."""

	prefix: str  # '$' or 'jQuery'
	receiver: StringLiteral
	method: str
	arguments: tuple[StringLiteral | BareToken, ...] = field(default_factory=tuple)
	start: int = 0
	end: int = 0

	@property
	def subject(self) -> StringLiteral | BareToken | None:
		"""The last argument, which carries the payload or identifier."""
		return self.arguments[-1] if self.arguments else None

	@property
	def leading_arguments(self) -> tuple[StringLiteral | BareToken, ...]:
		return self.arguments[:-1]
