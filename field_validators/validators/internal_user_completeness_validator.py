import logging

from typing import List

from field_validators.constants.validation_results import ValidationResult
from field_validators.models.contact_information import ContactInformation
from field_validators.utils.string_utils import is_empty
from field_validators.validators.completeness_validator import \
    CompletenessValidator

LOG = logging.getLogger(__name__)


class InternalUserCompletenessValidator(CompletenessValidator):
    """ Internal users only need an email address. """

    def check_completeness(self,
                           contact_information: ContactInformation
                           ) -> List[ValidationResult]:

        messages: List[ValidationResult] = []

        if is_empty(contact_information.email):
            LOG.debug('Internal user is missing an email address')

            messages.append(ValidationResult.MISSING_EMAIL)

        return messages
