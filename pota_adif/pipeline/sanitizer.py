"""Per-record field normalization.

``SANITIZE_RULES`` maps a field name to a small rule object; ``sanitize_record``
applies the rule of every present field and then runs the derived-field
fixups. Fields without a rule pass through untouched. Applying the sanitizer
twice yields the same record as applying it once.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from pota_adif.fields.predicates import band_from_freq, is_band, parse_float, parse_int
from pota_adif.fields.tables import (
    DATE_FIELDS,
    QSL_RCVD_FIELDS,
    QSL_SENT_FIELDS,
    QSO_DOWNLOAD_STATUS_FIELDS,
    QSO_UPLOAD_STATUS_FIELDS,
    TIME_FIELDS,
)

Record = dict[str, Any]

TRUTHY = frozenset({"y", "yes", "true", "t", "1", "on"})
SSB_SIDEBANDS = frozenset({"USB", "LSB"})
_WHOLE_NUMBER = re.compile(r"^\s*[-+]?\d+\s*$")


class SanitizeRule(Protocol):
    def apply(self, value: Any) -> Any: ...


# --- Rules ---


@dataclass(frozen=True)
class ToInt:
    """Leading integer prefix, 0 when there is none."""

    def apply(self, value: Any) -> int:
        return parse_int(value)


@dataclass(frozen=True)
class WholeNumber:
    """Integer text becomes an int; anything else is left for the validator to reject."""

    def apply(self, value: Any) -> Any:
        if isinstance(value, str) and _WHOLE_NUMBER.match(value):
            return int(value)
        return value


@dataclass(frozen=True)
class ToFloat:
    def apply(self, value: Any) -> float:
        return parse_float(value)


@dataclass(frozen=True)
class Truncate:
    length: int

    def apply(self, value: Any) -> str:
        return str(value)[: self.length]


@dataclass(frozen=True)
class Upper:
    def apply(self, value: Any) -> str:
        return str(value).strip().upper()


@dataclass(frozen=True)
class Digits:
    def apply(self, value: Any) -> str:
        return re.sub(r"\D", "", str(value))


@dataclass(frozen=True)
class TimeDigits:
    """HHMM becomes HHMMSS."""

    def apply(self, value: Any) -> str:
        return re.sub(r"\D", "", str(value)).ljust(6, "0")


@dataclass(frozen=True)
class Frequency:
    def apply(self, value: Any) -> str:
        return f"{parse_float(value):.6f}"


@dataclass(frozen=True)
class ToBool:
    def apply(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in TRUTHY


def _table(rule: SanitizeRule, fields: Iterable[str]) -> dict[str, SanitizeRule]:
    return {name: rule for name in fields}


SANITIZE_RULES: dict[str, SanitizeRule] = {
    **_table(
        ToInt(),
        (
            "age", "ant_az", "ant_el", "a_index", "k_index", "max_bursts", "my_altitude",
            "sfi", "srx", "stx", "dxcc", "my_dxcc", "tx_pwr", "rx_pwr",
        ),
    ),
    **_table(WholeNumber(), ("nr_bursts", "nr_pings")),
    **_table(ToFloat(), ("altitude", "distance")),
    **_table(
        Truncate(1),
        ("ant_path",)
        + QSL_RCVD_FIELDS
        + QSL_SENT_FIELDS
        + QSO_UPLOAD_STATUS_FIELDS
        + QSO_DOWNLOAD_STATUS_FIELDS,
    ),
    "cont": Truncate(2),
    **_table(
        Upper(),
        (
            "band", "band_rx", "call", "pota_ref", "my_pota_ref", "pota_my_park_ref",
            "pota_my_location", "pota_park_ref", "pota_location", "sig", "sig_info",
            "my_sig", "my_sig_info", "operator", "station_callsign", "cnty", "submode",
            "state", "my_state", "gridsquare", "my_gridsquare", "prop_mode", "mode",
        ),
    ),
    **_table(Digits(), DATE_FIELDS),
    **_table(TimeDigits(), TIME_FIELDS),
    **_table(Frequency(), ("freq", "freq_rx")),
    **_table(ToBool(), ("silent_key", "qso_random", "force_init")),
}


# --- Record Operations ---


def _rederive_band(record: Record, band_field: str, freq_field: str) -> None:
    if band_field not in record or freq_field not in record:
        return
    if is_band(record[band_field]):
        return
    band = band_from_freq(record[freq_field])
    if band is not None:
        record[band_field] = band


def sanitize_record(record: Record) -> Record:
    """Return a normalized copy of ``record``. Never raises."""
    clean: Record = {}
    for key, value in record.items():
        key = str(key).strip().lower()
        rule = SANITIZE_RULES.get(key)
        clean[key] = rule.apply(value) if rule is not None and value is not None else value

    if clean.get("mode") in SSB_SIDEBANDS:
        clean["submode"] = clean["mode"]
        clean["mode"] = "SSB"
    if "station_callsign" in clean and "operator" not in clean:
        clean["operator"] = clean["station_callsign"]
    _rederive_band(clean, "band", "freq")
    _rederive_band(clean, "band_rx", "freq_rx")
    return clean


def filter_record(
    record: Record, errors: Iterable[str], optional: Collection[str]
) -> tuple[Record, list[str]]:
    """Drop errored optional fields from ``record``.

    Returns the filtered record and the errors that are not covered by
    ``optional``; the record still has problems when that list is non-empty.
    """
    dropped = {name for name in errors if name in optional}
    remaining = [name for name in errors if name not in dropped]
    kept = {
        key: value for key, value in record.items() if str(key).strip().lower() not in dropped
    }
    return kept, remaining
