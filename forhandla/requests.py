"""
    forhandla.requests
    ~~~~~~~~~~~~~~~~~~

    Request wrappers that can negotiate against their own accept headers.

    :copyright:
        (c) 2017 Ben Mather, based on Werkzeug, see AUTHORS for more details.
    :license:
        BSD, see LICENSE for more details.
"""
import logging

from werkzeug.exceptions import NotAcceptable
from werkzeug.wrappers import Request as BaseRequest

from forhandla.accept import Negotiator, normalize_header_name


log = logging.getLogger(__name__)


class NegotiationRequestMixin(object):
    """Adds content negotiation to a werkzeug request.  Expects a `headers`
    attribute.
    """

    def negotiate(self, header_name, supported, strict=False):
        """Matches the named accept header of this request against the
        values the server `supported`.

        A missing header is treated as `*`.

        :param strict:
            If set, raise `NotAcceptable` instead of returning a rejected
            token.
        """
        header_name = normalize_header_name(header_name)

        if isinstance(supported, Negotiator):
            negotiator = supported
        else:
            negotiator = Negotiator(supported)

        token = negotiator.match(self.headers.get(header_name, '*'))

        if strict and token.quality == 0.0:
            log.info(
                "%s: %r not acceptable, supported %r",
                header_name, self.headers.get(header_name),
                negotiator.supported,
            )
            raise NotAcceptable()

        return token

    def negotiate_content_type(self, supported, strict=False):
        return self.negotiate('Accept', supported, strict=strict)

    def negotiate_language(self, supported, strict=False):
        return self.negotiate('Accept-Language', supported, strict=strict)

    def negotiate_charset(self, supported, strict=False):
        return self.negotiate('Accept-Charset', supported, strict=strict)

    def negotiate_encoding(self, supported, strict=False):
        return self.negotiate('Accept-Encoding', supported, strict=strict)


class Request(NegotiationRequestMixin, BaseRequest):
    """Werkzeug request with content negotiation helpers.
    """


__all__ = ['NegotiationRequestMixin', 'Request']
