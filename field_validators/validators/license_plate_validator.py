from field_validators.utils.string_utils import is_blank


class LicensePlateValidator:

    def is_valid(self, license_plate: str) -> bool:
        raise NotImplementedError(
            'Subclassed validator must implement this method.')


class DefaultLicensePlateValidator(LicensePlateValidator):
    """ Used for countries without known plate rules, so any
    non-blank value is accepted.
    """

    def is_valid(self, license_plate: str) -> bool:
        return not is_blank(license_plate)
