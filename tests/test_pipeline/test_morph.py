"""Tests for field projections and the POTA reference unroll."""

import pytest

from pota_adif.fields.tables import KNOWN_FIELDS, POTA_FIELDS
from pota_adif.pipeline.morph import (
    PROJECTIONS,
    UNROLLED_FROM,
    MorphMode,
    normalize_aliases,
    project,
    unroll_record,
)


class TestProjection:
    @pytest.mark.parametrize("mode", [MorphMode.ADIF_STRICT, MorphMode.POTA_ONLY])
    def test_idempotent(self, mode):
        record = {"call": "w1aw", "app_custom": "x", "pota_ref": "us-0001", "comment": "hi"}
        once = project(record, PROJECTIONS[mode])
        assert project(once, PROJECTIONS[mode]) == once

    def test_strict_drops_unknown_fields(self):
        record = {"call": "w1aw", "app_custom": "x"}
        assert project(record, KNOWN_FIELDS) == {"call": "w1aw"}

    def test_pota_only(self):
        record = {"call": "w1aw", "comment": "hi", "my_pota_ref": "us-0001"}
        assert project(record, POTA_FIELDS) == {"call": "w1aw", "my_pota_ref": "us-0001"}


class TestNormalizeAliases:
    def test_sig_info_copied(self):
        record = {"my_sig_info": "us-0001", "sig_info": "us-0002"}
        normalize_aliases(record)
        assert record["my_pota_ref"] == "us-0001"
        assert record["pota_ref"] == "us-0002"

    def test_existing_ref_takes_precedence(self):
        record = {"my_sig_info": "us-9999", "my_pota_ref": "us-0001"}
        normalize_aliases(record)
        assert record["my_pota_ref"] == "us-0001"


class TestUnrollRecord:
    def test_activator_multi_ref(self):
        result = unroll_record(0, {"call": "w1aw", "my_pota_ref": "us-0001,us-0002"})
        assert result.replace
        assert [r["pota_my_park_ref"] for r in result.records] == ["us-0001", "us-0002"]
        for derived in result.records:
            assert "pota_park_ref" not in derived
            assert derived[UNROLLED_FROM] == 0

    @pytest.mark.parametrize("m, n", [(2, 1), (1, 3), (2, 3), (3, 3)])
    def test_cardinality(self, m, n):
        mine = ",".join(f"us-{i:04d}" for i in range(m))
        theirs = ",".join(f"ca-{i:04d}" for i in range(n))
        result = unroll_record(5, {"my_pota_ref": mine, "pota_ref": theirs})
        pairs = {(r["pota_my_park_ref"], r["pota_park_ref"]) for r in result.records}
        assert len(result.records) == m * n
        assert len(pairs) == m * n

    def test_locations_do_not_leak_between_pairings(self):
        result = unroll_record(1, {"my_pota_ref": "us-0001@us-ca, us-0002"})
        first, second = result.records
        assert first["pota_my_park_ref"] == "us-0001"
        assert first["pota_my_location"] == "us-ca"
        assert second["pota_my_park_ref"] == "us-0002"
        assert "pota_my_location" not in second

    def test_single_hunter_ref_with_location(self):
        result = unroll_record(2, {"my_pota_ref": "us-0001,us-0002", "pota_ref": "ca-0001@ca-on"})
        for derived in result.records:
            assert derived["pota_park_ref"] == "ca-0001"
            assert derived["pota_location"] == "ca-on"

    def test_single_refs_updated_in_place(self):
        record = {"my_pota_ref": "us-0001@us-ca", "pota_ref": "us-0002"}
        result = unroll_record(7, record)
        assert not result.replace
        assert result.records == []
        assert record["pota_my_park_ref"] == "us-0001"
        assert record["pota_my_location"] == "us-ca"
        assert record[UNROLLED_FROM] == 7
        assert record["pota_park_ref"] == "us-0002"
        assert "pota_location" not in record

    def test_bare_ref_is_not_stamped(self):
        record = {"my_pota_ref": "us-0001"}
        unroll_record(3, record)
        assert record["pota_my_park_ref"] == "us-0001"
        assert UNROLLED_FROM not in record

    def test_alias_feeds_the_unroll(self):
        result = unroll_record(0, {"sig_info": "us-0001,us-0002"})
        assert [r["pota_park_ref"] for r in result.records] == ["us-0001", "us-0002"]

    def test_record_without_references_is_untouched(self):
        record = {"call": "w1aw", "band": "20m"}
        result = unroll_record(0, record)
        assert not result.replace
        assert record == {"call": "w1aw", "band": "20m"}

    def test_unroll_clears_stale_derived_fields(self):
        record = {
            "my_pota_ref": "us-0001,us-0002@us-ny",
            "pota_my_park_ref": "us-9999",
            "pota_my_location": "us-ca",
            "pota_location": "ca-on",
        }
        result = unroll_record(0, record)
        pairs = [(r["pota_my_park_ref"], r.get("pota_my_location")) for r in result.records]
        assert pairs == [("us-0001", None), ("us-0002", "us-ny")]
        assert all("pota_location" not in r for r in result.records)

    def test_in_place_bare_ref_clears_stale_location(self):
        record = {"my_pota_ref": "us-0001", "pota_my_location": "us-ca"}
        unroll_record(0, record)
        assert record["pota_my_park_ref"] == "us-0001"
        assert "pota_my_location" not in record
