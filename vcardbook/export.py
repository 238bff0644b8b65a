from __future__ import annotations

import csv
import io
import json
import logging
import sys
from collections.abc import Iterable
from typing import BinaryIO

from .errors import OutputDestinationExistsError, UnsupportedExportFormatError
from .models import Contact
from .types import CSV_HEADER, ContactRecord, EntryRecord
from .utils import format_entries

log = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "json")


def check_format(fmt: str) -> str:
    if fmt not in EXPORT_FORMATS:
        raise UnsupportedExportFormatError(fmt)
    return fmt


def contact_to_row(c: Contact) -> list[str]:
    return [
        c.name,
        format_entries(c.emails),
        format_entries(c.phones),
        c.organization,
        c.note,
        c.address,
    ]


def contacts_to_csv(contacts: Iterable[Contact], delimiter: str = ",") -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=(delimiter or ",")[0], lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for c in contacts:
        writer.writerow(contact_to_row(c))
    return buf.getvalue()


def _entry_record(entry) -> EntryRecord:
    return {"Value": entry.value, "Type": entry.type}


def contact_to_record(c: Contact) -> ContactRecord:
    return {
        "Name": c.name,
        "FamilyName": c.family_name or "",
        "GivenName": c.given_name or "",
        "MiddleName": c.middle_name or "",
        "Prefix": c.prefix or "",
        "Suffix": c.suffix or "",
        "Emails": [_entry_record(e) for e in c.emails],
        "Phones": [_entry_record(p) for p in c.phones],
        "Organization": c.organization,
        "Note": c.note,
        "Address": c.address,
        "Birthday": c.birthday.isoformat() if c.birthday else None,
        "SourceFile": c.source_file,
    }


def contacts_to_json(contacts: Iterable[Contact]) -> str:
    records = [contact_to_record(c) for c in contacts]
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def export_contacts(contacts: Iterable[Contact], fmt: str = "csv", delimiter: str = ",") -> bytes:
    """Serialize contacts as UTF-8 encoded CSV or JSON."""
    check_format(fmt)
    if fmt == "json":
        text = contacts_to_json(contacts)
    else:
        text = contacts_to_csv(contacts, delimiter)
    return text.encode("utf-8")


def write_output(data: bytes, output: str | None = None, stream: BinaryIO | None = None) -> None:
    """Write to ``output`` (which must not exist yet) or to a binary stream."""
    if not output:
        stream = stream or sys.stdout.buffer
        stream.write(data)
        stream.flush()
        return
    try:
        with open(output, "xb") as f:
            f.write(data)
    except FileExistsError as exc:
        raise OutputDestinationExistsError(output) from exc
    log.debug("Wrote %d bytes to %s", len(data), output)


__all__ = [
    "EXPORT_FORMATS",
    "check_format",
    "contacts_to_csv",
    "contacts_to_json",
    "contact_to_record",
    "export_contacts",
    "write_output",
]
