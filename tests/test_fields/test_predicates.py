"""Tests for field-value predicates and numeric coercion."""

from datetime import datetime, timezone

import pytest

from pota_adif.fields import predicates as p


class TestNumericCoercion:
    @pytest.mark.parametrize(
        "value, expected",
        [("12", 12), ("12abc", 12), (" -5", -5), ("abc", 0), ("", 0), (7.9, 7), (True, 1)],
    )
    def test_parse_int(self, value, expected):
        assert p.parse_int(value) == expected

    def test_parse_float(self):
        assert p.parse_float("14.074MHz") == 14.074
        assert p.parse_float(".5") == 0.5
        assert p.parse_float("n/a") == 0.0

    def test_is_numeric(self):
        assert p.is_numeric("1e3")
        assert p.is_numeric(" 42 ")
        assert p.is_numeric(3.5)
        assert not p.is_numeric("42w")
        assert not p.is_numeric(True)


class TestEnumerations:
    def test_case_insensitive(self):
        assert p.is_band("20m")
        assert p.is_mode("ft8")
        assert p.is_submode("usb")
        assert p.is_continent("na")

    def test_unknown_values(self):
        assert not p.is_band("21M")
        assert not p.is_mode("USB")
        assert not p.is_continent("XX")

    def test_is_field(self):
        assert p.is_field(" CALL ")
        assert not p.is_field("not_a_field")

    def test_is_dxcc(self):
        assert p.is_dxcc(291)
        assert p.is_dxcc("291")
        assert p.is_dxcc("none")
        assert not p.is_dxcc(9999)

    def test_qsl_statuses(self):
        assert p.is_qsl_rcvd("V")
        assert not p.is_qsl_sent("V")
        assert p.is_qsl_via("b")


class TestFrequencies:
    def test_band_from_freq(self):
        assert p.band_from_freq("14.074") == "20M"
        assert p.band_from_freq(7.2) == "40M"
        assert p.band_from_freq("0.0") is None

    def test_is_freq_against_declared_band(self):
        assert p.is_freq("14.074", "20M")
        assert not p.is_freq("7.074", "20M")

    def test_is_freq_without_band(self):
        assert p.is_freq("7.074")
        assert not p.is_freq("1000000000")

    def test_unknown_band_falls_back_to_any_band(self):
        assert p.is_freq("14.074", "BOGUS")


class TestFormats:
    def test_is_date(self):
        assert p.is_date("20231225")
        assert p.is_date("2023-12-25")
        assert not p.is_date("19291231")
        assert not p.is_date("20231301")
        assert not p.is_date(f"{datetime.now(timezone.utc).year + 2}0101")

    def test_is_date_does_not_check_calendar(self):
        assert p.is_date("20230231")

    def test_is_time(self):
        assert p.is_time("1234")
        assert p.is_time("123456")
        assert not p.is_time("2400")
        assert not p.is_time("123460")
        assert not p.is_time("12345")

    def test_coordinates(self):
        assert p.is_lat("45.5")
        assert p.is_lat("N045 12.345")
        assert not p.is_lat("91")
        assert not p.is_lat("E045 12.345")
        assert p.is_lon("-179.9")
        assert p.is_lon("W071 30.000")
        assert not p.is_lon("181")

    def test_maidenhead(self):
        assert p.is_maidenhead("FN31")
        assert p.is_maidenhead("fn31pr")
        assert p.is_maidenhead("")
        assert not p.is_maidenhead("FN3")
        assert not p.is_maidenhead("ZZ31")

    def test_grid_list(self):
        assert p.is_grid_list("FN31,FN32")
        assert not p.is_grid_list("FN31,")

    def test_rst(self):
        assert p.is_rst("59")
        assert p.is_rst("599")
        assert not p.is_rst("09")

    def test_callsign(self):
        assert p.is_callsign("W1AW")
        assert p.is_callsign("w1aw/p")
        assert not p.is_callsign("1111")
        assert not p.is_callsign("ABCD")


class TestProgramReferences:
    def test_pota(self):
        assert p.is_pota_ref("US-0001")
        assert p.is_pota_ref("us-0001@us-ca")
        assert not p.is_pota_ref("US-0001,US-0002")
        assert not p.is_pota_ref("K-12")

    def test_other_programs(self):
        assert p.is_sota_ref("W7W/LC-001")
        assert p.is_wwff_ref("KFF-0001")
        assert p.is_iota_ref("NA-001")
        assert not p.is_iota_ref("XX-001")
