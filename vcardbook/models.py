from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class EmailEntry:
    value: str
    type: str = ""


@dataclass(frozen=True)
class PhoneEntry:
    value: str
    type: str = ""


@dataclass(frozen=True)
class Contact:
    name: str = ""
    family_name: Optional[str] = None
    given_name: Optional[str] = None
    middle_name: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    emails: Tuple[EmailEntry, ...] = field(default_factory=tuple)
    phones: Tuple[PhoneEntry, ...] = field(default_factory=tuple)
    organization: str = ""
    note: str = ""
    address: str = ""
    birthday: Optional[date] = None
    source_file: str = ""
