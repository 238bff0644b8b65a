from vcardbook.names import display_name, sort_key
from vcardbook.vcards import parse_vcards

VCARD_21_CHARSET = (
    "BEGIN:VCARD\r\n"
    "VERSION:2.1\r\n"
    "N;CHARSET=ISO-8859-1:Dör;Jöhn;;;\r\n"
    "FN;CHARSET=ISO-8859-1:Jöhn Dör\r\n"
    "TEL;HOME:+1 555 010 2000\r\n"
    "TEL;WORK:+1 555 010 2001\r\n"
    "EMAIL;INTERNET:john@example.com\r\n"
    "EMAIL;INTERNET:john.work@example.com\r\n"
    "ORG;CHARSET=ISO-8859-1:Åcme;Sälës\r\n"
    "END:VCARD\r\n"
)

VCARD_MISSING_FN_N = (
    "BEGIN:VCARD\r\n"
    "VERSION:3.0\r\n"
    "TEL;TYPE=CELL:+44 20 7946 0958\r\n"
    "EMAIL:someone+tag@example.co.uk\r\n"
    "END:VCARD\r\n"
)

VCARD_MULTI = (
    "BEGIN:VCARD\r\nVERSION:3.0\r\nN:Alpha;Ada;;;\r\nFN:Ada Alpha\r\nTEL;TYPE=CELL:+1 111 1111\r\nEND:VCARD\r\n"
    "BEGIN:VCARD\r\nVERSION:3.0\r\nN:Beta;Bob;;;\r\nFN:Bob Beta\r\nEMAIL:bob@example.com\r\nEND:VCARD\r\n"
)


def test_v21_legacy_type_flags():
    contacts = parse_vcards(VCARD_21_CHARSET)
    assert len(contacts) == 1
    c = contacts[0]
    assert c.family_name == "Dör"
    assert c.given_name == "Jöhn"
    assert [(p.value, p.type) for p in c.phones] == [
        ("+1 555 010 2000", "HOME"),
        ("+1 555 010 2001", "WORK"),
    ]
    # INTERNET is not a type label we keep
    assert [e.type for e in c.emails] == ["", ""]
    assert c.organization == "Åcme;Sälës"
    assert display_name(c) == "Dör, Jöhn"


def test_missing_fn_and_n_leaves_names_empty():
    contacts = parse_vcards(VCARD_MISSING_FN_N)
    assert len(contacts) == 1
    c = contacts[0]
    assert c.name == ""
    assert display_name(c) == ""
    assert sort_key(c) == ""
    assert c.phones[0].type == "CELL"
    assert c.emails[0].value == "someone+tag@example.co.uk"


def test_multiple_cards_in_one_text():
    contacts = parse_vcards(VCARD_MULTI)
    assert [c.name for c in contacts] == ["Ada Alpha", "Bob Beta"]
    assert contacts[0].phones[0].value == "+1 111 1111"
    assert contacts[1].emails[0].type == ""
