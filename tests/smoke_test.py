import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
from vcardbook.export import export_contacts
from vcardbook.loader import load_vcard_file

SAMPLES = ROOT / 'tests' / 'smoke_vcards'

def run_one(name: str):
    contacts = load_vcard_file(str(SAMPLES / name))
    assert contacts, 'Expected at least one contact'
    out = export_contacts(contacts, 'csv').decode('utf-8')
    assert out.startswith('Name,Emails,Phones,Organization,Note,Address\n'), 'Bad CSV header'
    assert len(out.splitlines()) == len(contacts) + 1, 'One CSV row per contact'
    for c in contacts:
        assert c.source_file.endswith(name), f'Bad provenance: {c.source_file}'
    print(f"OK: {name} -> {len(contacts)} contact(s)")

if __name__ == '__main__':
    for fname in ['sample_21.vcf', 'sample_30.vcf', 'sample_40.vcf']:
        run_one(fname)
    print('Smoke tests passed.')
