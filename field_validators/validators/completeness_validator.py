from typing import List

from field_validators.constants.validation_results import ValidationResult
from field_validators.models.contact_information import ContactInformation


class CompletenessValidator:

    def check_completeness(self,
                           contact_information: ContactInformation
                           ) -> List[ValidationResult]:
        raise NotImplementedError(
            'Subclassed validator must implement this method.')
