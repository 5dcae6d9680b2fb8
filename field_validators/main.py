import argparse
import logging
import sys

from typing import List, Optional

from field_validators import settings
from field_validators.constants import L10N
from field_validators.constants.countries import Country
from field_validators.models.contact_information import ContactInformation
from field_validators.models.license_plate import LicensePlate
from field_validators.validators.completeness_validator import \
    CompletenessValidator
from field_validators.validators.external_user_completeness_validator import \
    ExternalUserCompletenessValidator
from field_validators.validators.internal_user_completeness_validator import \
    InternalUserCompletenessValidator

LOGGING_LEVELS = {'critical': logging.CRITICAL,
                  'error': logging.ERROR,
                  'warning': logging.WARNING,
                  'info': logging.INFO,
                  'debug': logging.DEBUG}

COMPLETENESS_POLICIES = {'internal': InternalUserCompletenessValidator,
                         'external': ExternalUserCompletenessValidator}

LOG = logging.getLogger(__name__)

def country_code(value: str) -> Country:
    try:
        return Country(value.upper())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"unknown country code '{value}', expected one of: "
            f"{', '.join(country.value for country in Country)}")

def check_plate(args: argparse.Namespace) -> int:
    license_plate = LicensePlate(value=args.plate, country=args.country)
    valid: bool = license_plate.is_valid()

    LOG.info(f'license plate: {license_plate}, valid: {valid}')

    print(L10N.get_license_plate_message(
        license_plate.value, license_plate.country.value, valid))

    return 0 if valid else 1

def check_contact(args: argparse.Namespace) -> int:
    contact_information = ContactInformation(email=args.email,
                                             mobile=args.mobile)
    validator: CompletenessValidator = COMPLETENESS_POLICIES[args.policy]()

    results = validator.check_completeness(contact_information)

    LOG.info(f'contact information: {contact_information}, results: {results}')

    if not results:
        print(L10N.CONTACT_INFORMATION_COMPLETE_STRING)
        return 0

    for message in L10N.get_validation_messages(results):
        print(message)

    return 1

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Validate license plates and contact information')
    parser.add_argument(
        '-l',
        '--log-level',
        default=settings.LOG_LEVEL,
        help='Log level')
    parser.add_argument(
        '-f',
        '--log-file',
        help='Log file name')

    subparsers = parser.add_subparsers(dest='command', required=True)

    plate_parser = subparsers.add_parser(
        'plate', help='Check the format of a license plate')
    plate_parser.add_argument(
        '-c',
        '--country',
        default=settings.DEFAULT_COUNTRY,
        type=country_code,
        help='Registration country code, e.g. DE')
    plate_parser.add_argument('plate', help='License plate, e.g. "KA PA 777"')
    plate_parser.set_defaults(func=check_plate)

    contact_parser = subparsers.add_parser(
        'contact', help='Check contact information for missing fields')
    contact_parser.add_argument(
        '--policy',
        choices=sorted(COMPLETENESS_POLICIES),
        default='internal',
        help='Which users the contact information belongs to')
    contact_parser.add_argument('--email', help='Email address')
    contact_parser.add_argument('--mobile', help='Mobile number')
    contact_parser.set_defaults(func=check_contact)

    return parser.parse_args(argv)

def run(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging_level: int = LOGGING_LEVELS.get(
        args.log_level, logging.NOTSET)
    logging.basicConfig(level=logging_level, filename=args.log_file,
                        format='%(asctime)s %(levelname)s: %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S')

    return args.func(args)

if __name__ == '__main__':
    sys.exit(run())
