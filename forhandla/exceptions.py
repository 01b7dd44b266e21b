"""
    forhandla.exceptions
    ~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
from werkzeug.exceptions import NotAcceptable


class InvalidHeaderValue(NotAcceptable, ValueError):
    """Raised if a segment of an accept header can not be parsed.

    Carries the `406 Not Acceptable` status of its werkzeug parent so that it
    can be returned directly from a wsgi application, but can also be caught
    as a plain `ValueError` by code that doesn't care about http.

    `header`
        The offending header text, with whitespace removed.
    """
    def __init__(self, header, description=None, response=None):
        self.header = header

        if description is None:
            description = '"%s" is not a valid Accept header' % header

        super(InvalidHeaderValue, self).__init__(
            description=description, response=response
        )


__all__ = ['InvalidHeaderValue']
