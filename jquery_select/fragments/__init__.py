from jquery_select.fragments.service import FragmentExtractor
from jquery_select.fragments.unescape import unescape_js

__all__ = ['FragmentExtractor', 'unescape_js']
