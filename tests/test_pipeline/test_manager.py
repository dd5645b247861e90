"""Tests for the pipeline manager: load, merge, process and persist."""

import json

import pytest

from pota_adif.config.settings import AdifConfig, PipelineConfig
from pota_adif.pipeline.document import DOCUMENT_KEY
from pota_adif.pipeline.manager import PipelineManager
from pota_adif.pipeline.morph import MorphMode
from pota_adif.telemetry.errors import InputSourceError

PARK_LOG = (
    "<programid:6>TESTER\n<eoh>\n"
    "<call:4>W1AW<operator:5>K1ABC<band:3>20m<mode:3>SSB"
    "<qso_date:8>20231225<time_on:4>1200<my_pota_ref:15>US-0001,US-0002<eor>\n"
    "<call:4>N0CA<operator:5>K1ABC<band:3>40m<mode:2>CW"
    "<qso_date:8>20231225<time_on:4>1230<my_pota_ref:7>US-0001<eor>\n"
)
HOME_LOG = (
    "<eoh>\n"
    "<call:4>W1AW<operator:5>K1ABC<band:3>20m<mode:3>SSB"
    "<qso_date:8>20231225<time_on:4>1200<my_pota_ref:15>US-0001,US-0002<eor>\n"
)


def _manager(**pipeline):
    return PipelineManager(AdifConfig(pipeline=PipelineConfig(**pipeline)))


@pytest.fixture
def log_files(tmp_path):
    park = tmp_path / "park.adi"
    park.write_text(PARK_LOG, encoding="utf-8")
    home = tmp_path / "home.adi"
    home.write_text(HOME_LOG, encoding="utf-8")
    return park, home


class TestLoadAndMerge:
    def test_load_returns_document_index(self, log_files):
        manager = _manager()
        assert manager.load_file(log_files[0]) == 0
        assert manager.load(str(log_files[1])) == 1
        assert manager.load_string(HOME_LOG) == 2
        assert len(manager.documents) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputSourceError):
            _manager().load_file(tmp_path / "missing.adi")

    def test_merge_requires_documents(self):
        with pytest.raises(ValueError):
            _manager().merge()

    def test_single_document_is_returned_as_is(self):
        manager = _manager()
        manager.load_string(HOME_LOG)
        manager.parse()
        assert manager.merge() is manager.documents[0]

    def test_merge_records_provenance(self, log_files):
        manager = _manager()
        for path in log_files:
            manager.load_file(path)
        manager.parse()
        merged = manager.merge()
        assert merged.count == 3
        assert merged.sources == [
            ["fn=park.adi", "ec=2", "pn=TESTER"],
            ["fn=home.adi", "ec=1"],
        ]
        assert "parse" in merged.get_timers()

    def test_overrides_apply_to_every_document(self, log_files):
        manager = _manager(overrides={"Operator": "n0ca"})
        for path in log_files:
            manager.load_file(path)
        document = manager.run()
        assert {r["operator"] for r in document.entries()} == {"N0CA"}


class TestProcess:
    def test_default_run_dedupes_merged_logs(self, log_files):
        manager = _manager()
        for path in log_files:
            manager.load_file(path)
        document = manager.run()
        assert document.count == 2
        assert list(document.duplicates) == [2]

    def test_pota_run_unrolls_before_validating(self, log_files):
        manager = _manager(mode="pota")
        manager.load_file(log_files[0])
        document = manager.run()
        parks = sorted(r["pota_my_park_ref"] for r in document.entries())
        assert parks == ["US-0001", "US-0001", "US-0002"]
        assert document.errors == {}

    def test_disabled_stages(self, log_files):
        manager = _manager(sanitize_records=False, validate_records=False, dedupe_records=False)
        for path in log_files:
            manager.load_file(path)
        document = manager.run()
        assert document.count == 3
        assert document.errors == {}
        assert document.records[0]["band"] == "20m"

    def test_projection(self):
        manager = _manager(morph=MorphMode.POTA_ONLY)
        manager.load_string("<eoh><call:4>W1AW<comment:2>hi<eor>")
        document = manager.run()
        assert "comment" not in document.records[0]

    def test_chunking(self, log_files):
        manager = _manager(chunk_records=True, chunk_max_size=1)
        manager.load_file(log_files[0])
        document = manager.run()
        assert document.chunks == [[0], [1]]

    def test_qps_failure_is_data(self):
        manager = _manager()
        manager.load_string(HOME_LOG)
        document = manager.run()
        assert document.errors[DOCUMENT_KEY] == ["qps"]
        assert document.count == 1


class TestPersist:
    @pytest.fixture
    def processed(self, log_files):
        manager = _manager()
        manager.load_file(log_files[0])
        return manager, manager.run()

    def test_persist_atomic(self, processed, tmp_path):
        manager, document = processed
        target = tmp_path / "out.adi"
        assert manager.persist(document, target) == target
        assert "<eoh>" in target.read_text(encoding="utf-8")
        assert not (tmp_path / "out.adi.tmp").exists()

    def test_persist_json(self, processed, tmp_path):
        manager, document = processed
        target = manager.persist(document, tmp_path / "out.json", "json")
        report = json.loads(target.read_text(encoding="utf-8"))
        assert report["meta"]["count"] == 2

    def test_persist_failure_leaves_nothing(self, processed, tmp_path):
        manager, document = processed
        target = tmp_path / "missing" / "out.adi"
        with pytest.raises(OSError):
            manager.persist(document, target)
        assert not target.exists()
        assert not (tmp_path / "missing").exists()
