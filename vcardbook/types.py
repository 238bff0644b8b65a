from __future__ import annotations

from typing import TypedDict


class EntryRecord(TypedDict):
    Value: str
    Type: str


class ContactRecord(TypedDict):
    Name: str
    FamilyName: str
    GivenName: str
    MiddleName: str
    Prefix: str
    Suffix: str
    Emails: list[EntryRecord]
    Phones: list[EntryRecord]
    Organization: str
    Note: str
    Address: str
    Birthday: str | None
    SourceFile: str


CSV_HEADER = ("Name", "Emails", "Phones", "Organization", "Note", "Address")


__all__ = [
    "EntryRecord",
    "ContactRecord",
    "CSV_HEADER",
]
