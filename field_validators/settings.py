import os

DEFAULT_COUNTRY: str = os.getenv('FIELD_VALIDATORS_DEFAULT_COUNTRY', 'DE')
LOG_LEVEL: str = os.getenv('FIELD_VALIDATORS_LOG_LEVEL', 'warning')
