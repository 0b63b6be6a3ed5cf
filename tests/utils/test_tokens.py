import string

from django.test import SimpleTestCase

from drf_remember.codec import DELIMITER
from drf_remember.utils.tokens import generate_persistence_token


class PersistenceTokenTests(SimpleTestCase):
    def test_token_shape(self):
        token = generate_persistence_token()
        self.assertEqual(len(token), 128)
        self.assertTrue(set(token) <= set(string.hexdigits.lower()))
        self.assertNotIn(DELIMITER, token)

    def test_tokens_are_random(self):
        self.assertNotEqual(generate_persistence_token(), generate_persistence_token())
