from collections.abc import Iterator
from dataclasses import dataclass, field

import soupsieve
from bs4 import BeautifulSoup, Tag


@dataclass(frozen=True, eq=False)
class SelectionScope:
	"""The elements nested assertions currently search, and the scope that was active before."""

	elements: tuple[Tag, ...] = field(default_factory=tuple)
	parent: 'SelectionScope | None' = None
	source: str = 'response'

	@property
	def depth(self) -> int:
		depth = 0
		scope = self.parent
		while scope is not None:
			depth += 1
			scope = scope.parent
		return depth

	def select(self, selector: str) -> list[Tag]:
		"""CSS-select against every scoped element and its descendants, in document order per element."""
		compiled = soupsieve.compile(selector)
		selected: list[Tag] = []
		seen: set[int] = set()
		for element in self.elements:
			# a parsed document is a container, never a match itself
			candidates = [element] if not isinstance(element, BeautifulSoup) and compiled.match(element) else []
			candidates.extend(compiled.select(element))
			for candidate in candidates:
				if id(candidate) not in seen:
					seen.add(id(candidate))
					selected.append(candidate)
		return selected

	def __iter__(self) -> Iterator[Tag]:
		return iter(self.elements)

	def __len__(self) -> int:
		return len(self.elements)

	def __getitem__(self, index: int) -> Tag:
		return self.elements[index]
