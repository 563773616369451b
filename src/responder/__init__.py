"""
Keyword-driven response generator.

Maps input words to canned responses loaded from a keyword response file,
falling back to a random default response when nothing is recognised.
"""

from .config import ResponderConfig, load_config
from .defaults import FALLBACK_RESPONSE, DefaultResponseList, build_default_responses
from .errors import MalformedInputError, ResourceUnavailableError, ResponderError
from .observability import SelectionRecord
from .selector import ResponseSelector
from .table import ResponseTable, build_response_map

__all__ = [
    'ResponderConfig', 'load_config',
    'FALLBACK_RESPONSE', 'DefaultResponseList', 'build_default_responses',
    'MalformedInputError', 'ResourceUnavailableError', 'ResponderError',
    'SelectionRecord',
    'ResponseSelector',
    'ResponseTable', 'build_response_map',
]
