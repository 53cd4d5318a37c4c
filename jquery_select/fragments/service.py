import logging

from bs4 import BeautifulSoup, Tag

from jquery_select.calls.patterns import build_patterns
from jquery_select.calls.scanner import scan_calls
from jquery_select.calls.views import CallShape, ScriptCall
from jquery_select.config import JQuerySelectConfig
from jquery_select.fragments.unescape import unescape_js
from jquery_select.utils import time_execution_sync

logger = logging.getLogger(__name__)


class FragmentExtractor:
	"""Pulls escaped HTML payloads out of matching calls and parses them into element fragments."""

	def __init__(self, shape: CallShape | None = None, config: JQuerySelectConfig | None = None):
		self.shape = shape or CallShape()
		self.config = config or JQuerySelectConfig()
		self.capture = build_patterns(self.shape).capture

	def payloads(self, body: str, calls: list[ScriptCall] | None = None) -> list[str]:
		"""Escaped payloads of every matching call, in order of appearance."""
		if calls is None:
			calls = scan_calls(body)
		payloads: list[str] = []
		for call in calls:
			payloads.extend(self.capture.payloads(call))
		return payloads

	def parse(self, payload: str) -> list[Tag]:
		"""Unescape one payload and return the element nodes at the top of the parsed document."""
		document = BeautifulSoup(unescape_js(payload), self.config.html_parser)
		return [child for child in document.contents if isinstance(child, Tag)]

	@time_execution_sync('--extract_fragments')
	def extract(self, body: str, calls: list[ScriptCall] | None = None) -> list[Tag]:
		fragments: list[Tag] = []
		payloads = self.payloads(body, calls)
		for payload in payloads:
			fragments.extend(self.parse(payload))
		logger.debug(f'Extracted {len(fragments)} fragment(s) from {len(payloads)} payload(s)')
		return fragments
