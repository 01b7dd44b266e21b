"""
    forhandla.testsuite
    ~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.

"""
import unittest

from forhandla.testsuite import (
    test_exceptions, test_token, test_negotiator,
    test_accept_content_type, test_accept_language, test_accept_charset,
    test_accept_encoding, test_negotiation, test_requests,
)


loader = unittest.TestLoader()
suite = unittest.TestSuite((
    loader.loadTestsFromModule(test_exceptions),
    loader.loadTestsFromModule(test_token),
    loader.loadTestsFromModule(test_negotiator),
    loader.loadTestsFromModule(test_accept_content_type),
    loader.loadTestsFromModule(test_accept_language),
    loader.loadTestsFromModule(test_accept_charset),
    loader.loadTestsFromModule(test_accept_encoding),
    loader.loadTestsFromModule(test_negotiation),
    loader.loadTestsFromModule(test_requests),
))
