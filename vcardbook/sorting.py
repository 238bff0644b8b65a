from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from .models import Contact
from .names import sort_key


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_by_sort_key(a: Contact, b: Contact, reverse: bool = False) -> int:
    result = _cmp(sort_key(a), sort_key(b))
    return -result if reverse else result


def compare_by_birthday(a: Contact, b: Contact, reverse: bool = False) -> int:
    """Order by month then day; missing birthdays go last in both directions."""
    if a.birthday is None and b.birthday is None:
        return 0
    if a.birthday is None:
        return 1
    if b.birthday is None:
        return -1
    result = _cmp(a.birthday.month, b.birthday.month) or _cmp(a.birthday.day, b.birthday.day)
    return -result if reverse else result


def sort_by_key(contacts: Iterable[Contact], reverse: bool = False) -> list[Contact]:
    return sorted(contacts, key=cmp_to_key(lambda a, b: compare_by_sort_key(a, b, reverse)))


def sort_by_birthday(contacts: Iterable[Contact], reverse: bool = False) -> list[Contact]:
    return sorted(contacts, key=cmp_to_key(lambda a, b: compare_by_birthday(a, b, reverse)))


__all__ = [
    "compare_by_sort_key",
    "compare_by_birthday",
    "sort_by_key",
    "sort_by_birthday",
]
