from __future__ import annotations

import logging

import vobject
from vobject.base import VObjectError

from .birthday import parse_birthday
from .errors import FileDecodeError
from .models import Contact, EmailEntry, PhoneEntry
from .utils import resolve_type

log = logging.getLogger(__name__)

NAME_FIELDS = ("family", "given", "additional", "prefix", "suffix")
ADDRESS_FIELDS = ("street", "city", "region", "code", "country")


def _text(value: object) -> str:
    """Flatten a vobject field value (str, list of str or None) to text."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def _optional(value: object) -> str | None:
    text = _text(value)
    return text or None


def format_address(adr: object) -> str:
    """Join street, city, region, postal code and country, skipping blanks.

    Accepts either a vobject Address or the raw ``box;ext;street;...`` text.
    """
    if adr is None:
        return ""
    if isinstance(adr, str):
        parts = adr.split(";")
        components = parts[2:7]
    else:
        components = [_text(getattr(adr, f, "")) for f in ADDRESS_FIELDS]
    return ", ".join(c for c in components if c)


def contact_from_vcard(v, source_file: str = "") -> Contact:
    """Map one decoded vCard component onto a Contact."""
    fn_obj = getattr(v, "fn", None)
    name = _text(fn_obj.value) if fn_obj is not None else ""

    n_parts: dict[str, str | None] = dict.fromkeys(NAME_FIELDS)
    n_obj = getattr(v, "n", None)
    if n_obj is not None:
        nval = n_obj.value  # vobject.vcard.Name
        n_parts = {f: _optional(getattr(nval, f, None)) for f in NAME_FIELDS}

    emails = tuple(
        EmailEntry(
            value=_text(e.value),
            type=resolve_type(getattr(e, "params", {}), getattr(e, "singletonparams", [])),
        )
        for e in getattr(v, "email_list", [])
    )
    phones = tuple(
        PhoneEntry(
            value=_text(p.value),
            type=resolve_type(getattr(p, "params", {}), getattr(p, "singletonparams", [])),
        )
        for p in getattr(v, "tel_list", [])
    )

    org = ""
    org_obj = getattr(v, "org", None)
    if org_obj is not None:
        vals = org_obj.value
        org = ";".join(_text(x) for x in vals) if isinstance(vals, list) else _text(vals)

    note_obj = getattr(v, "note", None)
    note = _text(note_obj.value) if note_obj is not None else ""

    adr_obj = getattr(v, "adr", None)
    address = format_address(adr_obj.value) if adr_obj is not None else ""

    bday_obj = getattr(v, "bday", None)
    birthday = parse_birthday(_text(bday_obj.value)) if bday_obj is not None else None

    return Contact(
        name=name,
        family_name=n_parts["family"],
        given_name=n_parts["given"],
        middle_name=n_parts["additional"],
        prefix=n_parts["prefix"],
        suffix=n_parts["suffix"],
        emails=emails,
        phones=phones,
        organization=org,
        note=note,
        address=address,
        birthday=birthday,
        source_file=source_file,
    )


def parse_vcards(
    text: str, source_file: str = "", logger: logging.Logger | None = None
) -> list[Contact]:
    """Decode every VCARD block in ``text``.

    Blocks with no usable fields still produce a Contact. Raises
    FileDecodeError when vobject cannot parse the text.
    """
    logger = logger or log
    contacts: list[Contact] = []
    try:
        for v in vobject.readComponents(text):
            if (v.name or "").upper() != "VCARD":
                logger.debug("Skipping non-vCard component %s in %s", v.name, source_file)
                continue
            contact = contact_from_vcard(v, source_file)
            logger.debug("Loaded contact %r from %s", contact.name, source_file)
            contacts.append(contact)
    # bad base64 or quoted-printable payloads surface as ValueError/UnicodeError
    except (VObjectError, ValueError, UnicodeError) as exc:
        raise FileDecodeError(source_file, exc) from exc
    return contacts


__all__ = ["parse_vcards", "contact_from_vcard", "format_address"]
