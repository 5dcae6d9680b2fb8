from dataclasses import dataclass

from field_validators.constants.countries import Country
from field_validators.license_plate_validator_builder import \
    LicensePlateValidatorBuilder


@dataclass(frozen=True)
class LicensePlate:
    """ Represents a license plate as entered, with its registration country """

    value: str
    country: Country = Country.GERMANY

    def is_valid(self) -> bool:
        validator = LicensePlateValidatorBuilder().build_validator(self.country)

        return validator.is_valid(self.value)
