"""
    forhandla.accept._base
    ~~~~~~~~~~~~~~~~~~~~~~

    Parsing of individual accept header segments into tokens.

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import re
import math
from urllib.parse import parse_qsl

from werkzeug.datastructures import ImmutableDict

from forhandla.exceptions import InvalidHeaderValue


_whitespace_re = re.compile(r'\s+')

_value_re = re.compile(
    r'''
        ^
        (?P<type> \* | [a-z0-9._]+ )
        (?P<separator> [/_-] )?
        (?P<subtype> \* | [a-z0-9.\-_+]+ )?
        $
    ''', re.VERBOSE | re.IGNORECASE
)


class AcceptToken(object):
    """A single alternative from an `Accept`, `Accept-Language`,
    `Accept-Charset` or `Accept-Encoding` header.

    Tokens are immutable.  The negotiator derives new tokens using
    :meth:`evolve` rather than modifying parsed ones.
    """
    def __init__(
                self, type, subtype='*', *,
                separator='/', quality=1.0, weight=0.0, params=None
            ):
        self._type = type
        self._subtype = subtype
        self._separator = separator
        self._quality = float(quality)
        self._weight = float(weight)

        if params is None:
            params = {}
        self._params = ImmutableDict(params)

    @property
    def type(self):
        return self._type

    @property
    def subtype(self):
        return self._subtype

    @property
    def separator(self):
        return self._separator

    @property
    def quality(self):
        return self._quality

    @property
    def weight(self):
        """Rank assigned during negotiation.  Always `0.0` for freshly parsed
        tokens.
        """
        return self._weight

    @property
    def params(self):
        return self._params

    @property
    def catch_all(self):
        return self._type == '*' and self._subtype == '*'

    @property
    def value(self):
        """The textual form of the token, without parameters.

        Empty if the token was explicitly rejected with `q=0`.  Languages,
        charsets and encodings without a subtype render as the bare type.
        """
        if self._quality == 0.0:
            return ''

        if self._subtype == '*':
            return self._type

        return self._type + self._separator + self._subtype

    def evolve(self, **changes):
        """Returns a new token with the given fields replaced.
        """
        fields = {
            'type': self._type,
            'subtype': self._subtype,
            'separator': self._separator,
            'quality': self._quality,
            'weight': self._weight,
            'params': self._params,
        }
        fields.update(changes)
        return AcceptToken(**fields)

    def __eq__(self, other):
        if not isinstance(other, AcceptToken):
            return NotImplemented

        return (
            self._type == other._type and
            self._subtype == other._subtype and
            self._separator == other._separator and
            self._quality == other._quality and
            self._weight == other._weight and
            self._params == other._params
        )

    def __hash__(self):
        return hash((
            self._type, self._subtype, self._separator,
            self._quality, self._weight,
        ))

    def __str__(self):
        return self.value

    def __repr__(self):
        return (
            '{name}(type={type!r}, subtype={subtype!r}, '
            'separator={separator!r}, quality={quality!r}, '
            'weight={weight!r}, params={params!r})'
        ).format(
            name=self.__class__.__name__,
            type=self._type,
            subtype=self._subtype,
            separator=self._separator,
            quality=self._quality,
            weight=self._weight,
            params=dict(self._params),
        )


def _parse_quality(params):
    try:
        q = float(params.pop('q', '1'))
    except ValueError:
        return 1.0

    if math.isnan(q):
        return 1.0

    return max(min(q, 1.0), 0.0)


def parse_token(raw):
    """Creates a new `AcceptToken` from one comma separated segment of an
    accept header.

    :raises InvalidHeaderValue:
        If the type does not match the accept header grammar, or if a
        wildcard type is combined with a concrete subtype (`*/json`).
    """
    header = _whitespace_re.sub('', raw)
    spec, *str_params = header.split(';')

    separator = '/'
    if spec:
        match = _value_re.match(spec)
        if match is None:
            raise InvalidHeaderValue(header)
        if match.group('separator'):
            separator = match.group('separator')

    type, _, subtype = spec.partition(separator)
    if not subtype:
        subtype = '*'

    # https://tools.ietf.org/html/rfc7231#section-5.3.2
    if type == '*' and subtype != '*':
        raise InvalidHeaderValue(header)

    type = type.lower().strip()

    # Vendor types like `vnd.api-v1+json` are matched on their suffix.
    if '+' in subtype:
        subtype = subtype.rsplit('+', 1)[1]
    subtype = subtype.strip()

    params = dict(parse_qsl('&'.join(str_params), keep_blank_values=True))
    quality = _parse_quality(params)

    return AcceptToken(
        type, subtype,
        separator=separator, quality=quality, params=params,
    )


def denied_token():
    """Returns the explicitly rejected catch-all, equivalent to `*;q=0`.
    """
    return AcceptToken('*', '*', quality=0.0)


def split_header(header):
    """Parses every comma separated segment of an accept header.
    """
    return [parse_token(segment) for segment in header.split(',')]
