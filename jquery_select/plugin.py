"""pytest plugin: per-test ``jquery_select`` factory fixture."""

from collections.abc import Callable
from typing import Any, NoReturn

import pytest

from jquery_select.assertions.service import JQueryAssertions
from jquery_select.config import JQuerySelectConfig


def _pytest_fail(message: str) -> NoReturn:
	pytest.fail(message)


@pytest.fixture
def jquery_select_config() -> JQuerySelectConfig:
	return JQuerySelectConfig.from_env()


@pytest.fixture
def jquery_select(jquery_select_config: JQuerySelectConfig) -> Callable[[Any], JQueryAssertions]:
	"""Build assertions for a response. Each test gets its own assertions, so scopes never leak between tests."""

	def factory(response: Any) -> JQueryAssertions:
		return JQueryAssertions(response, config=jquery_select_config, fail=_pytest_fail)

	return factory
