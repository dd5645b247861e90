"""Tests for duplicate QSO detection."""

from pota_adif.pipeline.dedupe import ABSENT, find_duplicates, fingerprint


def _qso(**fields):
    base = {"band": "20M", "call": "W1AW", "mode": "SSB", "qso_date": "20231225"}
    base.update(fields)
    return base


class TestFingerprint:
    def test_absent_fields_use_placeholder(self):
        assert fingerprint({"call": "W1AW"}) == "|".join([ABSENT, "W1AW"] + [ABSENT] * 8)

    def test_fields_outside_the_key_are_ignored(self):
        assert fingerprint(_qso(comment="a")) == fingerprint(_qso(comment="b"))

    def test_key_fields_matter(self):
        assert fingerprint(_qso()) != fingerprint(_qso(submode="USB"))


class TestFindDuplicates:
    def test_identical_records(self):
        records = {0: _qso(), 1: _qso()}
        assert find_duplicates(records) == {1: records[1]}

    def test_first_occurrence_is_kept(self):
        records = {4: _qso(), 7: _qso(call="K1ABC"), 9: _qso(), 12: _qso(call="K1ABC")}
        assert list(find_duplicates(records)) == [9, 12]

    def test_conservation(self):
        records = dict(enumerate([_qso(), _qso(), _qso(band="40M"), _qso(), _qso(band="40M")]))
        duplicates = find_duplicates(records)
        kept = [rid for rid in records if rid not in duplicates]
        assert len(kept) + len(duplicates) == len(records)
        assert kept == [0, 2]

    def test_no_duplicates(self):
        assert find_duplicates({0: _qso(), 1: _qso(call="K1ABC")}) == {}
