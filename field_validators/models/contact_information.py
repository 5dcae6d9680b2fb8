from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class ContactInformation:
    """ Represents the contact details of a user """

    email: Optional[str] = None
    mobile: Optional[str] = None
