"""
Configuration for jquery_select assertions.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

_ENV_PREFIX = 'JQUERY_SELECT_'


class JQuerySelectConfig(BaseModel):
	"""Settings shared by the matcher, the extractor and failure diagnostics"""

	model_config = ConfigDict(extra='forbid', frozen=True)

	body_preview_limit: int = Field(default=87, ge=0, description='Bodies longer than this are shortened in failure messages.')
	body_preview_edge: int = Field(default=40, ge=0, description='Characters kept from each end of a shortened body.')
	body_preview_marker: str = Field(default=' ..... ', description='Marker placed between the head and tail of a shortened body.')
	html_parser: str = Field(default='html.parser', description='BeautifulSoup parser backend used for payloads and documents.')

	@classmethod
	def from_env(cls, **overrides) -> 'JQuerySelectConfig':
		"""Build a config from JQUERY_SELECT_* environment variables (and a .env file, if present)."""
		load_dotenv()
		values = {}
		for name in cls.model_fields:
			raw = os.getenv(f'{_ENV_PREFIX}{name.upper()}')
			if raw is not None:
				values[name] = raw
		values.update(overrides)
		return cls.model_validate(values)
