"""Service layer for the directory-to-session pipeline."""

from tsh.services.dependencies import check_dependencies
from tsh.services.enumerator import DirectoryEnumerator, EnumeratorStrategy, build_search_request, filter_candidates
from tsh.services.multiplexer import MultiplexerClient
from tsh.services.selector import SelectorBridge
from tsh.services.session import SessionResolver

__all__ = [
    'check_dependencies',
    'DirectoryEnumerator',
    'EnumeratorStrategy',
    'build_search_request',
    'filter_candidates',
    'MultiplexerClient',
    'SelectorBridge',
    'SessionResolver',
]
