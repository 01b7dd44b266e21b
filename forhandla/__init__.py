"""
    forhandla
    ~~~~~~~~~

    :copyright: (c) 2014 by Ben Mather.
    :license: BSD, see LICENSE for more details.
"""
from forhandla.accept import (
    AcceptToken, Negotiator, ContentNegotiation,
    parse_token, match, match_best,
)
from forhandla.exceptions import InvalidHeaderValue

__all__ = [
    'AcceptToken', 'Negotiator', 'ContentNegotiation',
    'parse_token', 'match', 'match_best', 'InvalidHeaderValue',
]
