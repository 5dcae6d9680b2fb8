import logging

from field_validators.constants.countries import Country
from field_validators.validators.german_license_plate_validator import \
    GermanLicensePlateValidator
from field_validators.validators.license_plate_validator import \
    DefaultLicensePlateValidator, LicensePlateValidator

LOG = logging.getLogger(__name__)


class LicensePlateValidatorBuilder:

    def build_validator(self, country: Country) -> LicensePlateValidator:

        LOG.debug(f'building license plate validator for: {country}')

        if country == Country.GERMANY:
            return GermanLicensePlateValidator()

        LOG.debug('No plate rules for this country, using default validator')

        return DefaultLicensePlateValidator()
