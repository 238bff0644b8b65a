import sys

from vcardbook.birthday import format_birthday_for_display
from vcardbook.export import contacts_to_csv
from vcardbook.names import display_name, sort_key
from vcardbook.vcards import parse_vcards

VCARD_21_CHARSET = (
    "BEGIN:VCARD\r\n"
    "VERSION:2.1\r\n"
    "N;CHARSET=ISO-8859-1:Dör;Jöhn;;;\r\n"
    "FN;CHARSET=ISO-8859-1:Jöhn Dör\r\n"
    "TEL;HOME:+1 555 010 2000\r\n"
    "TEL;WORK;VOICE:+1 555 010 2001\r\n"
    "EMAIL;INTERNET:john@example.com\r\n"
    "ORG;CHARSET=ISO-8859-1:Åcme;Sälës\r\n"
    "BDAY:--07-13\r\n"
    "END:VCARD\r\n"
)

if len(sys.argv) > 1:
    with open(sys.argv[1], "rb") as f:
        text = f.read().decode("utf-8", errors="ignore")
    contacts = parse_vcards(text, source_file=sys.argv[1])
else:
    contacts = parse_vcards(VCARD_21_CHARSET)

for c in contacts:
    print('Parsed:', c)
    print('Display name:', display_name(c))
    print('Sort key:', sort_key(c))
    print('Birthday:', format_birthday_for_display(c.birthday))
print('CSV:\n' + contacts_to_csv(contacts))
