"""
    forhandla.accept.negotiator
    ~~~~~~~~~~~~~~~~~~~~~~~~~~~

    Matches the values supported by the server against the preferences sent
    by the client in an accept header.

    https://tools.ietf.org/html/rfc7231#section-5.3

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import logging

from forhandla.accept._base import split_header, denied_token


log = logging.getLogger(__name__)


def rank(support, work):
    """Returns a copy of `work` carrying its weight as a match for `support`.

    Scoring:
      - +100 if the (non wildcard) types are the same.
      - +q unless the supported value is a catch-all.
      - +1 for every parameter of the supported value that the accepted value
        repeats exactly, -1 for every one that it doesn't.
      - +q again.
    """
    weight = 0.0

    if support.type == work.type and work.type != '*':
        weight += 100

    if not support.catch_all:
        weight += work.quality

    for key, value in support.params.items():
        if work.params.get(key) == value:
            weight += 1
        else:
            weight -= 1

    weight += work.quality

    return work.evolve(weight=weight)


def pairwise_match(support, accept):
    """Returns a new token describing how `accept` matches `support`, or
    `None` if the two are incompatible.

    Explicit rejections (`q=0` on either side) are always returned so that
    they remain visible in the ranked result.
    """
    quality = accept.quality
    if quality == 1.0:
        quality = support.quality

    if accept.catch_all:
        return accept.evolve(
            type=support.type,
            subtype=support.subtype,
            separator=support.separator,
            quality=quality,
        )

    if support.quality == 0.0:
        return support

    if quality == 0.0:
        return accept.evolve(quality=quality)

    if support.type != accept.type and support.type != '*':
        return None

    subtype = accept.subtype
    if subtype == '*':
        subtype = support.subtype

    if subtype != support.subtype and support.subtype != '*':
        return None

    return rank(support, accept.evolve(subtype=subtype, quality=quality))


def match(supported, accepted):
    """Returns every candidate match between two accept header strings,
    best first.

    If nothing matches the result holds a single rejected catch-all (see
    :func:`denied_token`), so the list is never empty.

    :param supported:
        Header formatted string listing the values the server can produce.

    :param accepted:
        The accept header sent by the client.

    :raises InvalidHeaderValue:
        If either header contains a malformed segment.
    """
    accepts = split_header(accepted)
    supports = split_header(supported)

    matches = []
    for accept in accepts:
        for support in supports:
            result = pairwise_match(support, accept)
            if result is not None:
                matches.append(result)

    # `sorted` is stable, so ties keep the order of the headers.
    matches = sorted(matches, key=lambda token: token.weight, reverse=True)

    if not matches:
        matches = [denied_token()]

    log.debug(
        "negotiated %r against %r: %d candidate(s), best %r",
        accepted, supported, len(matches), matches[0].value,
    )

    return matches


def match_best(supported, accepted):
    return match(supported, accepted)[0]


class Negotiator(object):
    """Negotiates client accept headers against a fixed set of supported
    values.

    `supported`
        Header formatted string, for example `'text/html, application/json;q=0.8'`
        or `'en, de;q=0.5'`.  It is parsed again for every call, so the
        negotiator holds no state beyond the string and can be shared
        between threads.
    """
    def __init__(self, supported):
        self.supported = supported

    def match(self, accepted):
        """Returns the best token for the accept header.  The token has an
        empty `value` and a `quality` of zero if the header is not
        acceptable.
        """
        return match_best(self.supported, accepted)

    def match_all(self, accepted):
        return match(self.supported, accepted)

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self.supported)
