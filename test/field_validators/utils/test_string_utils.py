import ddt
import unittest

from field_validators.utils import string_utils


@ddt.ddt
class TestStringUtils(unittest.TestCase):

    @ddt.data({
        'value': None,
        'empty': True,
        'blank': True
    }, {
        'value': '',
        'empty': True,
        'blank': True
    }, {
        'value': ' \t\n',
        'empty': False,
        'blank': True
    }, {
        'value': 'a@b.c',
        'empty': False,
        'blank': False
    })
    @ddt.unpack
    def test_is_empty_and_is_blank(self, value, empty: bool, blank: bool):
        self.assertEqual(string_utils.is_empty(value), empty)
        self.assertEqual(string_utils.is_blank(value), blank)
