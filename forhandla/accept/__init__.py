"""
    forhandla.accept
    ~~~~~~~~~~~~~~~~

    Content negotiation for the `Accept`, `Accept-Language`, `Accept-Charset`
    and `Accept-Encoding` headers.

    https://developer.mozilla.org/en-US/docs/Web/HTTP/Content_negotiation

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import logging

from werkzeug.datastructures import ImmutableDict

from forhandla.accept._base import (
    AcceptToken, parse_token, denied_token, split_header,
)
from forhandla.accept.negotiator import (
    Negotiator, match, match_best, pairwise_match, rank,
)


log = logging.getLogger(__name__)


ACCEPT_HEADERS = (
    'Accept', 'Accept-Language', 'Accept-Charset', 'Accept-Encoding',
)

_header_names = {}
for _name in ACCEPT_HEADERS:
    _header_names[_name.lower()] = _name
    _header_names[_name.lower().replace('-', '_')] = _name


def normalize_header_name(name):
    """Maps `'accept_language'`, `'ACCEPT-LANGUAGE'` etc. on to the canonical
    header name.

    :raises ValueError: If `name` is not one of the accept headers.
    """
    try:
        return _header_names[name.lower()]
    except KeyError as e:
        raise ValueError("not an accept header: %r" % name) from e


class ContentNegotiation(object):
    """Negotiates all of the accept headers of a request at once.

    `config`
        Mapping from accept header name to the header formatted string of
        values that the server supports for it.  Headers that aren't
        configured are not negotiated.
    """
    def __init__(self, config):
        negotiators = {}
        for name, supported in dict(config).items():
            name = normalize_header_name(name)

            # Fail early on bad configuration rather than on first request.
            split_header(supported)

            negotiators[name] = Negotiator(supported)
        self._negotiators = ImmutableDict(negotiators)

    @property
    def config(self):
        return ImmutableDict(
            (name, negotiator.supported)
            for name, negotiator in self._negotiators.items()
        )

    def negotiate(self, headers):
        """
        :param headers:
            Request headers.  Anything with a `get` method will do, though
            only werkzeug `Headers` look names up case insensitively.

        :return:
            An `ImmutableDict` mapping each configured header name to the
            best matching `AcceptToken`.

        :raises InvalidHeaderValue:
            If the client sent a malformed header.
        """
        results = {}
        for name, negotiator in self._negotiators.items():
            accepted = headers.get(name)
            if accepted is None:
                log.debug("no %s header, accepting anything", name)
                accepted = '*'
            results[name] = negotiator.match(accepted)
        return ImmutableDict(results)

    def __repr__(self):
        return '<%s %r>' % (
            self.__class__.__name__, dict(self.config)
        )


def is_acceptable(results):
    """Returns `False` if any negotiated header was rejected.
    """
    return all(token.quality != 0.0 for token in results.values())


__all__ = [
    'AcceptToken', 'parse_token', 'denied_token', 'split_header',
    'Negotiator', 'match', 'match_best', 'pairwise_match', 'rank',
    'ACCEPT_HEADERS', 'normalize_header_name',
    'ContentNegotiation', 'is_acceptable',
]
