from __future__ import annotations

from collections.abc import Iterable

from .models import EmailEntry, PhoneEntry

# vCard 2.1 bare parameters, e.g. "TEL;HOME;VOICE:..."
LEGACY_TYPES = ("HOME", "WORK", "CELL", "FAX", "PAGER", "VOICE", "MSG")


def split_types(val: object) -> list[str]:
    if not val:
        return []
    if isinstance(val, str):
        parts = [p.strip() for p in val.split(",") if p.strip()]
    elif isinstance(val, list):
        parts = []
        for x in val:
            parts.extend([p.strip() for p in str(x).split(",") if p.strip()])
    else:
        parts = [str(val).strip()]
    return parts


def resolve_type(params: dict, singletonparams: Iterable[str] = ()) -> str:
    """Pick the single type label of an EMAIL or TEL property.

    A TYPE parameter wins and only its first listed value is kept. Without
    one, parameter names and bare vCard 2.1 flags are scanned for a known
    legacy label. Returns "" when neither is present.
    """
    p = params or {}
    for key, val in p.items():
        if str(key).upper() == "TYPE":
            types = split_types(val)
            if types:
                return types[0].upper()
    for name in list(p.keys()) + list(singletonparams or []):
        flag = str(name).upper()
        if flag in LEGACY_TYPES:
            return flag
    return ""


def format_entry(entry: EmailEntry | PhoneEntry) -> str:
    if entry.type:
        return f"{entry.value} ({entry.type.lower()})"
    return entry.value


def format_entries(entries: Iterable[EmailEntry | PhoneEntry]) -> str:
    return "; ".join(format_entry(e) for e in entries)


def entry_label(entry_type: str, default: str) -> str:
    return entry_type.lower() if entry_type else default


__all__ = [
    "LEGACY_TYPES",
    "split_types",
    "resolve_type",
    "format_entry",
    "format_entries",
    "entry_label",
]
