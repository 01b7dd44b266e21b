"""
    forhandla.testsuite.test_requests
    ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    Tests for negotiating from request objects.

    :copyright:
        (c) 2017 Ben Mather, based on Werkzeug, see AUTHORS for more details.
    :license:
        BSD, see LICENSE for more details.
"""
import unittest

from werkzeug.test import EnvironBuilder
from werkzeug.exceptions import NotAcceptable

from forhandla.accept import Negotiator
from forhandla.requests import Request


def make_request(**headers):
    builder = EnvironBuilder(headers=headers)
    return Request(builder.get_environ())


class RequestTestCase(unittest.TestCase):
    def test_negotiate_content_type(self):
        request = make_request(
            Accept='text/html;q=0.9, application/json'
        )

        token = request.negotiate_content_type('text/html, application/json')
        self.assertEqual('application/json', token.value)
        self.assertEqual(1.0, token.quality)

    def test_negotiate_language(self):
        request = make_request(**{
            'Accept-Language': 'fr;q=0.7, en;q=0.8, de;q=0.9, *;q=0.5',
        })

        token = request.negotiate_language('de,fr,en')
        self.assertEqual('de', token.value)
        self.assertEqual(0.9, token.quality)

    def test_negotiate_charset(self):
        request = make_request(**{
            'Accept-Charset': 'utf-16, iso-8859-1;q=0.7',
        })

        token = request.negotiate_charset('utf-8, iso-8859-1;q=0.5, *;q=0.1')
        self.assertEqual('iso-8859-1', token.value)

    def test_negotiate_encoding(self):
        request = make_request(**{'Accept-Encoding': '*'})

        token = request.negotiate_encoding('gzip, compress, deflate')
        self.assertEqual('gzip', token.value)

    def test_negotiate_missing_header(self):
        request = make_request()

        token = request.negotiate('accept_language', 'de, en')
        self.assertEqual('de', token.value)

    def test_negotiate_with_negotiator(self):
        request = make_request(Accept='application/json')

        token = request.negotiate('Accept', Negotiator('application/json'))
        self.assertEqual('application/json', token.value)

    def test_negotiate_not_acceptable(self):
        request = make_request(Accept='image/png')

        token = request.negotiate_content_type('application/json')
        self.assertEqual('', token.value)
        self.assertEqual(0.0, token.quality)

    def test_negotiate_strict(self):
        request = make_request(Accept='image/png')

        self.assertRaises(
            NotAcceptable,
            request.negotiate_content_type, 'application/json', strict=True
        )

    def test_negotiate_unknown_header(self):
        request = make_request()

        self.assertRaises(
            ValueError, request.negotiate, 'Content-Type', 'text/html'
        )
