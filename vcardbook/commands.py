from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import BinaryIO, TextIO

from .birthday import format_birthday_for_display
from .config import Config
from .errors import OutputDestinationExistsError
from .export import check_format, export_contacts, write_output
from .filtering import filter_contacts
from .loader import load_contacts
from .models import Contact
from .names import display_name
from .sorting import sort_by_birthday, sort_by_key
from .utils import entry_label

DEFAULT_EMAIL_TYPE = "email"
DEFAULT_PHONE_TYPE = "phone"


class App:
    """Runs the user-facing commands against the configured address books."""

    def __init__(self, config: Config, out: TextIO | None = None, binary_out: BinaryIO | None = None):
        self.config = config
        self.out = out or sys.stdout
        self.binary_out = binary_out

    def _print(self, *parts: str) -> None:
        print("\t".join(parts), file=self.out)

    def load(self, terms: Sequence[str] = ()) -> list[Contact]:
        contacts = load_contacts(self.config.address_book_paths())
        return filter_contacts(contacts, terms)

    def contact_parts(self, contact: Contact, long: bool = False) -> list[str]:
        parts = [display_name(contact)]
        for e in contact.emails:
            parts.append(f"{entry_label(e.type, DEFAULT_EMAIL_TYPE)}: {e.value}")
        for p in contact.phones:
            parts.append(f"{entry_label(p.type, DEFAULT_PHONE_TYPE)}: {p.value}")
        if long:
            if contact.organization:
                parts.append(f"org: {contact.organization}")
            if contact.note:
                parts.append(f"note: {contact.note}")
            if contact.address:
                parts.append(f"address: {contact.address}")
        return parts

    def list_contacts(self, long: bool = False, reverse: bool = False, terms: Sequence[str] = ()) -> None:
        contacts = self.load(terms)
        if not contacts:
            self._print("No contacts found")
            return
        for contact in sort_by_key(contacts, reverse):
            self._print(*self.contact_parts(contact, long))

    def list_emails(self, parsable: bool = False, reverse: bool = False, terms: Sequence[str] = ()) -> None:
        contacts = sort_by_key(self.load(terms), reverse)
        if not parsable:
            self._print("Name", "Email")
        for contact in contacts:
            for e in contact.emails:
                label = entry_label(e.type, DEFAULT_EMAIL_TYPE)
                if parsable:
                    self._print(e.value, contact.name, label)
                else:
                    self._print(display_name(contact), f"{label}: {e.value}")

    def list_phones(self, reverse: bool = False, terms: Sequence[str] = ()) -> None:
        contacts = sort_by_key(self.load(terms), reverse)
        self._print("Name", "Phone")
        for contact in contacts:
            for p in contact.phones:
                label = entry_label(p.type, DEFAULT_PHONE_TYPE)
                self._print(display_name(contact), f"{label}: {p.value}")

    def birthday_contacts(self, reverse: bool = False, terms: Sequence[str] = ()) -> list[Contact]:
        with_birthday = [c for c in self.load(terms) if c.birthday is not None]
        return sort_by_birthday(with_birthday, reverse)

    def print_birthdays(self, reverse: bool = False, terms: Sequence[str] = ()) -> None:
        contacts = self.birthday_contacts(reverse, terms)
        if not contacts:
            self._print("No contacts with birthdays found")
            return
        self._print("Name", "Birthday")
        for contact in contacts:
            self._print(display_name(contact), format_birthday_for_display(contact.birthday))

    def list_address_books(self) -> None:
        if not self.config.address_books:
            self._print("No address books configured")
            return
        self._print("Name", "Path")
        for ab in self.config.address_books.values():
            self._print(ab.name, ab.path)

    def export(
        self,
        fmt: str = "csv",
        delimiter: str = ",",
        output: str | None = None,
        terms: Sequence[str] = (),
    ) -> None:
        check_format(fmt)
        if output and os.path.exists(output):
            raise OutputDestinationExistsError(output)
        data = export_contacts(self.load(terms), fmt, delimiter)
        write_output(data, output, self.binary_out)


__all__ = ["App", "DEFAULT_EMAIL_TYPE", "DEFAULT_PHONE_TYPE"]
