"""Tests for the Document aggregate and its stages."""

import pytest

from pota_adif.pipeline.document import DOCUMENT_KEY, QPS_MARKER, Document, DocumentMode
from pota_adif.pipeline.morph import UNROLLED_FROM, MorphMode
from pota_adif.pipeline.stages import TOTAL_TIMER, Stage
from pota_adif.telemetry.errors import MalformedInputError

SAMPLE = (
    "Generated by test\n"
    "<adif_ver:5>3.1.4\n"
    "<programid:6>TESTER\n"
    "<eoh>\n"
    "<call:4>W1AW<operator:5>K1ABC<band:3>20m<mode:3>USB<freq:6>14.250"
    "<qso_date:8>20231225<time_on:4>1200<my_pota_ref:7>US-0001<eor>\n"
    "<call:4>N0CA<operator:5>K1ABC<band:3>40m<mode:2>CW<freq:5>7.030"
    "<qso_date:8>20231225<time_on:4>1210<my_pota_ref:15>US-0001,US-0002<eor>\n"
    "<call:4>W1AW<operator:5>K1ABC<band:3>20m<mode:3>USB<freq:6>14.250"
    "<qso_date:8>20231225<time_on:4>1200<my_pota_ref:7>US-0001<eor>\n"
)

SELF_OR_MISSING = {"@self", "band", "mode", "qso_date", "time_on"}


@pytest.fixture
def document():
    doc = Document(SAMPLE)
    doc.parse()
    return doc


class TestParse:
    def test_records_and_headers(self, document):
        assert document.count == 3
        assert document.records[0]["call"] == "w1aw"
        assert document.get_headers("PROGRAMID") == "TESTER"
        assert document.get_headers("strings") == ["Generated by test"]
        assert document.size == len(SAMPLE)

    def test_first_and_last_record(self, document):
        assert document.first_id == 0
        assert document.last_id == 1
        assert document.last_record["call"] == "n0ca"

    def test_reparse_resets_ids(self, document):
        document.parse()
        assert list(document.records) == [0, 1, 2]

    def test_overrides(self):
        doc = Document(SAMPLE)
        doc.override_field(" Operator ", " n0ca ")
        doc.parse()
        assert {r["operator"] for r in doc.entries()} == {"n0ca"}

    def test_empty_document_is_malformed(self):
        with pytest.raises(MalformedInputError):
            Document().parse()

    def test_from_file(self, tmp_path):
        path = tmp_path / "park.adi"
        path.write_text(SAMPLE, encoding="utf-8")
        doc = Document()
        doc.from_file(path)
        doc.parse()
        assert doc.filename == "park.adi"
        assert doc.count == 3


class TestRecords:
    def test_records_view_is_read_only(self, document):
        with pytest.raises(TypeError):
            document.records[99] = {}

    def test_ids_are_never_reused(self, document):
        document.remove_record(2)
        assert document.add_record({"call": "k1abc"}) == 3
        assert list(document.records) == [0, 1, 3]


class TestHeaders:
    def test_add_header(self):
        doc = Document()
        doc.add_header("free text ")
        doc.add_header(" ProgramID", "LOGGER ")
        assert doc.get_headers() == {"strings": ["free text"], "programid": "LOGGER"}
        assert doc.get_headers("missing") == ""

    def test_add_header_arity(self):
        with pytest.raises(TypeError):
            Document().add_header("a", "b", "c")


class TestTimers:
    def test_timers_accumulate_case_insensitively(self):
        doc = Document()
        doc.add_timer("Parse", 1.0)
        doc.add_timer(Stage.PARSE, 2.5)
        assert doc.get_timer("parse") == 3.5

    def test_total(self):
        doc = Document()
        doc.add_timer(Stage.SANITIZE, 1.25)
        doc.add_timer(Stage.VALIDATE, 0.5)
        assert doc.get_timers()[TOTAL_TIMER] == 1.75

    def test_stages_record_timers(self, document):
        document.sanitize()
        document.lint()
        assert {"parse", "sanitize", "lint"} <= set(document.get_timers())


class TestDefaultStages:
    def test_clean_log_has_no_errors(self, document):
        document.sanitize()
        document.validate()
        assert document.errors == {}

    def test_dedupe_conserves_records(self, document):
        document.sanitize()
        document.dedupe()
        assert document.count + len(document.duplicates) == 3
        assert list(document.duplicates) == [2]

    def test_validation_errors_are_keyed_by_id(self, document):
        document.sanitize()
        document.remove_record(0)
        document.add_record({"call": "W1AW", "operator": "W1AW"})
        document.validate()
        assert SELF_OR_MISSING <= set(document.errors[3])

    def test_qps_marker(self):
        doc = Document(
            "<eoh>" + "<call:4>W1AW<qso_date:8>20231225<time_on:4>1234<eor>" * 10
        )
        doc.parse()
        doc.validate()
        assert doc.errors[DOCUMENT_KEY] == [QPS_MARKER]

    def test_qps_check_can_be_disabled(self):
        doc = Document("<eoh><call:4>W1AW<eor>", check_qps=False)
        doc.parse()
        doc.validate()
        assert DOCUMENT_KEY not in doc.errors

    def test_chunk(self, document):
        document.sanitize()
        document.dedupe()
        document.chunk(max_size=1)
        assert document.chunks == [[0], [1]]

    def test_strict_morph(self):
        doc = Document("<eoh><call:4>W1AW<app_test_x:3>abc<eor>")
        doc.parse()
        doc.morph(MorphMode.ADIF_STRICT)
        assert doc.records[0] == {"call": "w1aw"}


class TestPotaMode:
    @pytest.fixture
    def pota_document(self):
        doc = Document(SAMPLE, mode=DocumentMode.POTA)
        doc.parse()
        doc.sanitize()
        doc.dedupe()
        return doc

    def test_unroll_replaces_multi_park_records(self, pota_document):
        pota_document.unroll_pota_refs()
        assert list(pota_document.records) == [0, 3, 4]
        assert pota_document.records[0]["pota_my_park_ref"] == "US-0001"
        unrolled = [pota_document.records[i] for i in (3, 4)]
        assert [r["pota_my_park_ref"] for r in unrolled] == ["US-0001", "US-0002"]
        assert all(r[UNROLLED_FROM] == 1 for r in unrolled)

    def test_morph_pota_refs_unrolls(self, pota_document):
        pota_document.morph("pota_refs")
        assert pota_document.count == 3
        assert pota_document.get_timer(Stage.UNROLL_POTA_REFS) >= 0

    def test_validate_after_unroll(self, pota_document):
        pota_document.unroll_pota_refs()
        pota_document.validate()
        assert pota_document.errors == {}

    def test_invalid_optional_fields_are_dropped(self):
        doc = Document(mode="pota", check_qps=False)
        record_id = doc.add_record(
            {
                "call": "W1AW",
                "operator": "K1ABC",
                "band": "20M",
                "mode": "SSB",
                "qso_date": "20231225",
                "time_on": "120000",
                "pota_my_park_ref": "US-0001",
                "age": 999,
            }
        )
        doc.validate()
        assert doc.errors == {}
        assert "age" not in doc.records[record_id]

    def test_missing_park_is_an_error(self):
        doc = Document("<eoh><call:4>W1AW<eor>", mode="pota", check_qps=False)
        doc.parse()
        doc.validate()
        assert "pota_my_park_ref" in doc.errors[0]


class TestOutput:
    def test_adif_round_trip(self, document):
        document.sanitize()
        reparsed = Document(document.to_adif())
        reparsed.parse()
        assert reparsed.count == document.count
        assert all("call" in record for record in reparsed.entries())
        assert document.get_timer(Stage.TO_ADIF) >= 0
