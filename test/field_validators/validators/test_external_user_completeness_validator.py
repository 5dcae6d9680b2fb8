import ddt
import unittest

from field_validators.constants.validation_results import ValidationResult
from field_validators.models.contact_information import ContactInformation
from field_validators.validators.completeness_validator import \
    CompletenessValidator
from field_validators.validators.external_user_completeness_validator import \
    ExternalUserCompletenessValidator


@ddt.ddt
class TestExternalUserCompletenessValidator(unittest.TestCase):

    def setUp(self):
        self.validator = ExternalUserCompletenessValidator()

    @ddt.data({
        'email': None,
        'mobile': None,
        'expected': [ValidationResult.MISSING_EMAIL,
                     ValidationResult.MISSING_MOBILE]
    }, {
        'email': '',
        'mobile': '',
        'expected': [ValidationResult.MISSING_EMAIL,
                     ValidationResult.MISSING_MOBILE]
    }, {
        'email': 'a@b.c',
        'mobile': None,
        'expected': [ValidationResult.MISSING_MOBILE]
    }, {
        'email': None,
        'mobile': '+49 170 1234567',
        'expected': [ValidationResult.MISSING_EMAIL]
    }, {
        'email': 'a@b.c',
        'mobile': '+49 170 1234567',
        'expected': []
    }, {
        'email': ' ',
        'mobile': ' ',
        'expected': []
    })
    @ddt.unpack
    def test_check_completeness(self, email, mobile, expected):
        contact_information = ContactInformation(email=email, mobile=mobile)

        self.assertEqual(
            self.validator.check_completeness(contact_information), expected)

    def test_base_validator_is_not_implemented(self):
        with self.assertRaises(NotImplementedError):
            CompletenessValidator().check_completeness(ContactInformation())
