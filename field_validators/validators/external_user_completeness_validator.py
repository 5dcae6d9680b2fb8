import logging

from typing import List

from field_validators.constants.validation_results import ValidationResult
from field_validators.models.contact_information import ContactInformation
from field_validators.utils.string_utils import is_empty
from field_validators.validators.completeness_validator import \
    CompletenessValidator

LOG = logging.getLogger(__name__)


class ExternalUserCompletenessValidator(CompletenessValidator):
    """ External users must be reachable by email and by mobile phone. """

    def check_completeness(self,
                           contact_information: ContactInformation
                           ) -> List[ValidationResult]:

        messages: List[ValidationResult] = []

        if is_empty(contact_information.email):
            messages.append(ValidationResult.MISSING_EMAIL)

        if is_empty(contact_information.mobile):
            messages.append(ValidationResult.MISSING_MOBILE)

        LOG.debug(f'completeness findings: {messages}')

        return messages
