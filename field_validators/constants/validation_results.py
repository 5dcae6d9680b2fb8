from enum import Enum

class ValidationResult(Enum):
    MISSING_CONTACT_INFO_GENERIC = 'missing_contact_info_generic'
    MISSING_EMAIL = 'missing_email'
    MISSING_MOBILE = 'missing_mobile'
