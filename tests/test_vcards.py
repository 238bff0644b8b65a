from datetime import date

import pytest
import vobject

from vcardbook import vcards
from vcardbook.errors import FileDecodeError
from vcardbook.vcards import format_address, parse_vcards

SAMPLE = (
    "BEGIN:VCARD\r\n"
    "VERSION:3.0\r\n"
    "N:Doe;John;;;\r\n"
    "FN:John Doe\r\n"
    "TEL;TYPE=CELL,HOME: +1 555 0100\r\n"
    "EMAIL;TYPE=WORK:john.doe@example.com\r\n"
    "ORG:Acme;Sales\r\n"
    "END:VCARD\r\n"
)

SAMPLE_WITH_BDAY_NOTES = (
    "BEGIN:VCARD\r\n"
    "VERSION:3.0\r\n"
    "N:Doe;Jane;;;\r\n"
    "FN:Jane Doe\r\n"
    "BDAY:1985-07-13\r\n"
    "NOTE:First line note\r\n"
    "ADR;TYPE=HOME:;;123 Main St;Springfield;IL;62701;USA\r\n"
    "END:VCARD\r\n"
)

SAMPLE_TYPES = (
    "BEGIN:VCARD\r\n"
    "VERSION:3.0\r\n"
    "FN:Types Test\r\n"
    "EMAIL;TYPE=home:first@example.com\r\n"
    "EMAIL:second@example.com\r\n"
    "EMAIL;TYPE=INTERNET,WORK:third@example.com\r\n"
    "TEL;HOME;TYPE=CELL:+1 555 0101\r\n"
    "TEL;WORK;VOICE:+1 555 0102\r\n"
    "TEL:+1 555 0103\r\n"
    "END:VCARD\r\n"
)


def test_parse_structured_name_types_and_org():
    contacts = parse_vcards(SAMPLE, source_file="/books/john.vcf")
    assert len(contacts) == 1
    c = contacts[0]
    assert c.name == "John Doe"
    assert c.family_name == "Doe"
    assert c.given_name == "John"
    assert c.middle_name is None
    assert c.prefix is None
    assert c.suffix is None
    assert c.organization == "Acme;Sales"
    # first listed TYPE value wins
    assert [p.type for p in c.phones] == ["CELL"]
    assert [(e.value, e.type) for e in c.emails] == [("john.doe@example.com", "WORK")]
    assert c.source_file == "/books/john.vcf"
    assert c.birthday is None


def test_bday_note_and_address():
    c = parse_vcards(SAMPLE_WITH_BDAY_NOTES)[0]
    assert c.birthday == date(1985, 7, 13)
    assert c.note == "First line note"
    assert c.address == "123 Main St, Springfield, IL, 62701, USA"


def test_type_resolution_order_and_encounter_order():
    c = parse_vcards(SAMPLE_TYPES)[0]
    assert [(e.value, e.type) for e in c.emails] == [
        ("first@example.com", "HOME"),
        ("second@example.com", ""),
        ("third@example.com", "INTERNET"),
    ]
    assert [p.type for p in c.phones] == ["CELL", "WORK", ""]


def test_truncated_structured_name_leaves_later_components_unset():
    text = "BEGIN:VCARD\r\nVERSION:3.0\r\nN:Smith;;Michael\r\nEND:VCARD\r\n"
    c = parse_vcards(text)[0]
    assert c.family_name == "Smith"
    assert c.given_name is None
    assert c.middle_name == "Michael"
    assert c.prefix is None
    assert c.suffix is None


def test_full_structured_name():
    text = "BEGIN:VCARD\r\nVERSION:3.0\r\nN:Einstein;Albert;;Prof.;PhD\r\nFN:Albert Einstein\r\nEND:VCARD\r\n"
    c = parse_vcards(text)[0]
    assert (c.family_name, c.given_name, c.prefix, c.suffix) == ("Einstein", "Albert", "Prof.", "PhD")


def test_empty_card_is_still_a_contact():
    contacts = parse_vcards("BEGIN:VCARD\r\nVERSION:3.0\r\nEND:VCARD\r\n")
    assert len(contacts) == 1
    c = contacts[0]
    assert c.name == ""
    assert c.family_name is None
    assert c.emails == ()
    assert c.phones == ()
    assert c.birthday is None


def test_unparseable_birthday_is_absent():
    text = "BEGIN:VCARD\r\nVERSION:3.0\r\nFN:X\r\nBDAY:someday\r\nEND:VCARD\r\n"
    assert parse_vcards(text)[0].birthday is None


def test_decode_error_is_wrapped(monkeypatch):
    def boom(text):
        raise vobject.base.ParseError("Failed to parse line", 3)
        yield  # pragma: no cover

    monkeypatch.setattr(vcards.vobject, "readComponents", boom)
    with pytest.raises(FileDecodeError) as excinfo:
        parse_vcards("whatever", source_file="broken.vcf")
    assert excinfo.value.path == "broken.vcf"


def test_bad_base64_photo_is_wrapped():
    text = "BEGIN:VCARD\r\nVERSION:3.0\r\nFN:X\r\nPHOTO;ENCODING=b;TYPE=JPEG:!!!notbase64@@\r\nEND:VCARD\r\n"
    with pytest.raises(FileDecodeError) as excinfo:
        parse_vcards(text, source_file="photo.vcf")
    assert excinfo.value.path == "photo.vcf"
    assert "failed to decode vCard" in str(excinfo.value)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (";;123 Main St;Springfield;IL;62701;USA", "123 Main St, Springfield, IL, 62701, USA"),
        (";;Amalienstraße 60;Neuburg;;86666;", "Amalienstraße 60, Neuburg, 86666"),
        (";;;Berlin;;;", "Berlin"),
        (";;;;;;", ""),
        (";;Main Street;;;12345;", "Main Street, 12345"),
        ("PO Box 1;Suite 2", ""),
    ],
)
def test_format_address(raw, expected):
    assert format_address(raw) == expected
