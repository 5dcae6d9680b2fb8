from enum import Enum

class Country(Enum):
    AUSTRIA = 'AT'
    BELGIUM = 'BE'
    FRANCE = 'FR'
    GERMANY = 'DE'
    NETHERLANDS = 'NL'
    OTHER = 'XX'
    POLAND = 'PL'
    SWITZERLAND = 'CH'
