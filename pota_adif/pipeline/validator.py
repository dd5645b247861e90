"""Per-record domain validation and the document QSO-rate check.

``validate_record`` never raises. It returns ``True`` for a record with no
problems, or the list of failing field names. Two markers can appear
besides field names: ``@self`` when ``call`` and ``operator`` do not carry
two distinct callsigns, and the name of each missing required field.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol

from pota_adif.fields import predicates as p
from pota_adif.fields.tables import (
    BASE_REQUIRED_FIELDS,
    DATE_FIELDS,
    QSL_RCVD_FIELDS,
    QSL_SENT_FIELDS,
    QSO_DOWNLOAD_STATUS_FIELDS,
    QSO_UPLOAD_STATUS_FIELDS,
    TIME_FIELDS,
)
from pota_adif.pipeline.parser import qso_timestamp

SELF_QSO = "@self"
DEFAULT_MAX_QSO_RATE = 5.0


class ValidateRule(Protocol):
    def check(self, value: Any, record: Mapping[str, Any]) -> bool: ...


# --- Rules ---


@dataclass(frozen=True)
class NumberRange:
    """Numeric value within optional inclusive bounds."""

    low: float | None = None
    high: float | None = None

    def check(self, value: Any, record: Mapping[str, Any]) -> bool:
        if not p.is_numeric(value):
            return False
        number = float(value)
        if self.low is not None and number < self.low:
            return False
        if self.high is not None and number > self.high:
            return False
        return True


@dataclass(frozen=True)
class StrictInt:
    """Only coerced integers pass. Numeric strings do not."""

    def check(self, value: Any, record: Mapping[str, Any]) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Callsign:
    def check(self, value: Any, record: Mapping[str, Any]) -> bool:
        return p.is_callsign(value)


@dataclass(frozen=True)
class OneOf:
    """Delegates to an enumeration or format predicate."""

    predicate: Callable[[Any], bool]

    def check(self, value: Any, record: Mapping[str, Any]) -> bool:
        return self.predicate(value)


@dataclass(frozen=True)
class FreqInBand:
    """Frequency inside the declared band, or inside any band if none is declared."""

    band_field: str

    def check(self, value: Any, record: Mapping[str, Any]) -> bool:
        return p.is_freq(value, record.get(self.band_field))


@dataclass(frozen=True)
class GridList:
    def check(self, value: Any, record: Mapping[str, Any]) -> bool:
        return p.is_grid_list(value)


def _table(rule: ValidateRule, fields: Iterable[str]) -> dict[str, ValidateRule]:
    return {name: rule for name in fields}


VALIDATE_RULES: dict[str, ValidateRule] = {
    **_table(Callsign(), ("call", "operator", "station_callsign")),
    "age": NumberRange(0, 120),
    "ant_az": NumberRange(0, 360),
    "ant_el": NumberRange(-90, 90),
    "a_index": NumberRange(0, 400),
    "k_index": NumberRange(0, 9),
    "my_cq_zone": NumberRange(1, 40),
    "my_itu_zone": NumberRange(1, 90),
    "sfi": NumberRange(0, 300),
    **_table(
        NumberRange(low=0),
        (
            "distance", "max_bursts", "rx_pwr", "tx_pwr", "srx", "stx", "my_fists",
            "my_iota_island_id", "ten_ten", "uksmg",
        ),
    ),
    **_table(NumberRange(), ("altitude", "my_altitude")),
    **_table(StrictInt(), ("nr_bursts", "nr_pings")),
    "freq": FreqInBand("band"),
    "freq_rx": FreqInBand("band_rx"),
    **_table(OneOf(p.is_band), ("band", "band_rx")),
    "mode": OneOf(p.is_mode),
    "submode": OneOf(p.is_submode),
    "cont": OneOf(p.is_continent),
    "ant_path": OneOf(p.is_ant_path),
    **_table(OneOf(p.is_arrl_section), ("arrl_sect", "my_arrl_sect")),
    **_table(OneOf(p.is_dxcc), ("dxcc", "my_dxcc")),
    "prop_mode": OneOf(p.is_propagation),
    **_table(OneOf(p.is_qso_upload), QSO_UPLOAD_STATUS_FIELDS),
    **_table(OneOf(p.is_qso_download), QSO_DOWNLOAD_STATUS_FIELDS),
    **_table(OneOf(p.is_qsl_rcvd), QSL_RCVD_FIELDS),
    **_table(OneOf(p.is_qsl_sent), QSL_SENT_FIELDS),
    **_table(OneOf(p.is_qsl_via), ("qsl_rcvd_via", "qsl_sent_via")),
    **_table(OneOf(p.is_date), DATE_FIELDS),
    **_table(OneOf(p.is_time), TIME_FIELDS),
    **_table(OneOf(p.is_maidenhead), ("gridsquare", "my_gridsquare")),
    **_table(GridList(), ("vucc_grids", "my_vucc_grids")),
    **_table(OneOf(p.is_lat), ("lat", "my_lat")),
    **_table(OneOf(p.is_lon), ("lon", "my_lon")),
    **_table(OneOf(p.is_pota_ref), ("pota_park_ref", "pota_my_park_ref")),
    **_table(OneOf(p.is_sota_ref), ("sota_ref", "my_sota_ref")),
    **_table(OneOf(p.is_iota_ref), ("iota", "my_iota")),
    **_table(OneOf(p.is_wwff_ref), ("wwff_ref", "my_wwff_ref")),
}


# --- Record Validation ---


def validate_record(
    record: Mapping[str, Any], required: Collection[str] = BASE_REQUIRED_FIELDS
) -> Literal[True] | list[str]:
    """Validate one record against ``VALIDATE_RULES``.

    ``@self`` is reported whenever the call/operator pair does not hold
    exactly two distinct values, which includes a record that carries only
    one of the two fields.
    """
    fields = {str(k).strip().lower(): v for k, v in record.items() if v is not None}
    errors: list[str] = []
    for name, value in fields.items():
        rule = VALIDATE_RULES.get(name)
        if rule is not None and not rule.check(value, fields):
            errors.append(name)

    identities = {fields[name] for name in ("call", "operator") if name in fields}
    if len(identities) != 2:
        errors.append(SELF_QSO)

    errors.extend(name for name in required if name not in fields)
    return errors or True


def check_duration(
    records: Iterable[Mapping[str, Any]], max_rate: float = DEFAULT_MAX_QSO_RATE
) -> bool:
    """True when the log spans time and averages fewer than ``max_rate`` QSOs/second.

    Records without a usable ``qso_date`` + ``time_on`` still count toward
    the rate but not toward the time span.
    """
    records = list(records)
    stamps = [stamp for stamp in map(qso_timestamp, records) if stamp is not None]
    if not stamps:
        return False
    diff = max(stamps) - min(stamps)
    return diff > 0 and len(records) / diff < max_rate
