import logging

from field_validators.constants import regexps as regexp_constants
from field_validators.validators.license_plate_validator import \
    LicensePlateValidator

LOG = logging.getLogger(__name__)


class GermanLicensePlateValidator(LicensePlateValidator):
    """Validates German license plates, e.g. KA PA 777

    A German license plate consists of at most 8 characters in two parts:

    · the geographic identifier: one, two or three letters (may contain
      umlauts)
    · the identification letters and numbers: up to two letters (no umlauts)
      and one to four digits (without leading zero)

    The vehicle safety test and registration seal stickers sit between the
    two parts, which is why plates are written with a gap there.

    Some plates deviate from these rules and are rejected here:

    · seasonal plates, which have at most 7 characters
    · plates of official cars, which can have up to six digits and no
      identification letters
    · classic cars, which can carry an H (historic) at the end: ER A 55H

    See https://de.wikipedia.org/wiki/Kfz-Kennzeichen_(Deutschland)#Aufbau
    """

    def is_valid(self, license_plate: str) -> bool:
        normalized_value: str = self.normalize(license_plate)

        LOG.debug(f'normalized license plate: {normalized_value}')

        return regexp_constants.GERMAN_LICENSE_PLATE_PATTERN.fullmatch(
            normalized_value) is not None

    def normalize(self, license_plate: str) -> str:
        normalized_value = license_plate.upper()
        normalized_value = regexp_constants.WHITESPACE_PATTERN.sub(
            regexp_constants.PLATE_SEPARATOR, normalized_value)
        normalized_value = regexp_constants.LETTER_DIGIT_BOUNDARY_PATTERN.sub(
            regexp_constants.PLATE_SEPARATOR, normalized_value)

        return regexp_constants.REPEATED_SEPARATOR_PATTERN.sub(
            regexp_constants.PLATE_SEPARATOR, normalized_value)
