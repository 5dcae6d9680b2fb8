from typing import List

from field_validators.constants.validation_results import ValidationResult

CONTACT_INFORMATION_COMPLETE_STRING = 'Contact information is complete.'

INVALID_LICENSE_PLATE_STRING = "'{}' is not a valid license plate for {}."

VALID_LICENSE_PLATE_STRING = "'{}' is a valid license plate for {}."

VALIDATION_RESULT_STRINGS = {
    ValidationResult.MISSING_CONTACT_INFO_GENERIC: (
        'Please provide your contact information so that we '
        'can reach you.'),
    ValidationResult.MISSING_EMAIL: 'Please provide an email address.',
    ValidationResult.MISSING_MOBILE: 'Please provide a mobile number.',
}

CONTACT_CHANNEL_RESULTS = (ValidationResult.MISSING_EMAIL,
                           ValidationResult.MISSING_MOBILE,)


def get_license_plate_message(plate: str, country_code: str, valid: bool) -> str:
    if valid:
        return VALID_LICENSE_PLATE_STRING.format(plate, country_code)
    else:
        return INVALID_LICENSE_PLATE_STRING.format(plate, country_code)


def get_validation_messages(results: List[ValidationResult]) -> List[str]:
    """ Map completeness findings to user-facing messages.

    When every contact channel is missing the per-field messages are
    replaced by the generic one.
    """

    if (ValidationResult.MISSING_CONTACT_INFO_GENERIC in results
            or all(result in results for result in CONTACT_CHANNEL_RESULTS)):
        return [VALIDATION_RESULT_STRINGS[
            ValidationResult.MISSING_CONTACT_INFO_GENERIC]]

    return [VALIDATION_RESULT_STRINGS[result] for result in results]
