"""
    forhandla.testsuite.test_exceptions
    ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.
"""
import unittest

from werkzeug.exceptions import HTTPException, NotAcceptable

from forhandla.exceptions import InvalidHeaderValue


class InvalidHeaderValueTestCase(unittest.TestCase):
    def test_hierarchy(self):
        exc = InvalidHeaderValue('*/json')

        self.assertIsInstance(exc, NotAcceptable)
        self.assertIsInstance(exc, HTTPException)
        self.assertIsInstance(exc, ValueError)

    def test_attributes(self):
        exc = InvalidHeaderValue('*/json')

        self.assertEqual(406, exc.code)
        self.assertEqual('*/json', exc.header)
        self.assertEqual(
            '"*/json" is not a valid Accept header', exc.description
        )
        self.assertEqual(
            '406 Not Acceptable: "*/json" is not a valid Accept header',
            str(exc)
        )

    def test_custom_description(self):
        exc = InvalidHeaderValue('*/json', description='bad header')
        self.assertEqual('bad header', exc.description)

    def test_response(self):
        response = InvalidHeaderValue('*/json').get_response()
        self.assertEqual(406, response.status_code)
