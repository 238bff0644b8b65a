from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Contact


def search_text(contact: Contact) -> str:
    """Lowercased text blob a filter phrase is searched in."""
    parts: list[str] = []
    if contact.name:
        parts.append(contact.name)
    for entry in (*contact.emails, *contact.phones):
        parts.append(entry.value)
        if entry.type:
            parts.append(entry.type)
    parts.extend(p for p in (contact.organization, contact.note, contact.address) if p)
    return " ".join(parts).lower().strip()


def matches(contact: Contact, terms: Sequence[str]) -> bool:
    """True when the space-joined terms occur contiguously in the contact text."""
    if not terms:
        return True
    phrase = " ".join(terms).lower()
    return phrase in search_text(contact)


def filter_contacts(contacts: Iterable[Contact], terms: Sequence[str]) -> list[Contact]:
    return [c for c in contacts if matches(c, terms)]


__all__ = ["search_text", "matches", "filter_contacts"]
