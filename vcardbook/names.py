from __future__ import annotations

from .models import Contact


def display_name(contact: Contact) -> str:
    """Render ``Family, Prefix Given Middle Suffix`` from the structured name.

    Falls back to the formatted name when neither family nor given name is set.
    """
    if contact.family_name or contact.given_name:
        family = contact.family_name or ""
        rest = " ".join(
            p
            for p in (contact.prefix, contact.given_name, contact.middle_name, contact.suffix)
            if p
        )
        if family and rest:
            return f"{family}, {rest}"
        return family or rest
    return contact.name or ""


def sort_key(contact: Contact) -> str:
    # a structured family name means a person, even with an ORG present
    if contact.family_name:
        return contact.family_name.lower()
    if contact.organization and contact.name:
        return contact.organization.lower()
    if contact.name:
        return contact.name.lower()
    return ""


__all__ = ["display_name", "sort_key"]
