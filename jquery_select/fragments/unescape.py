import re

# Literal replacements, applied in order. Later ones must not re-trigger earlier ones.
_SIMPLE_ESCAPES: tuple[tuple[str, str], ...] = (
	('\\"', '"'),
	("\\'", "'"),
	('\\/', '/'),
	('\\n', '\n'),
	('\\076', '>'),
	('\\074', '<'),
)

# A UTF-16 surrogate pair written as two escapes, or a single escape.
_UNICODE_ESCAPE_RE = re.compile(
	r'\\u(d[89ab][0-9a-f]{2})\\u(d[c-f][0-9a-f]{2})|\\u([0-9a-f]{4})',
	re.IGNORECASE,
)


def _decode_unicode_escape(match: re.Match[str]) -> str:
	high, low, single = match.groups()
	if single is not None:
		return chr(int(single, 16))
	return chr(0x10000 + ((int(high, 16) - 0xD800) << 10) + (int(low, 16) - 0xDC00))


def unescape_js(js_string: str) -> str:
	"""Unescape the body of a JS string literal produced by server-side escaping of HTML.

	Handles escaped quotes, ``\\/``, ``\\n``, the ``\\076``/``\\074`` octal escapes for ``>``/``<``
	and ``\\uXXXX`` escapes. Any other backslash sequence is left alone.
	"""
	unescaped = js_string
	for escaped, literal in _SIMPLE_ESCAPES:
		unescaped = unescaped.replace(escaped, literal)
	return _UNICODE_ESCAPE_RE.sub(_decode_unicode_escape, unescaped)
