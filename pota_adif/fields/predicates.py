"""Format and enumeration predicates over ADIF field values.

Every predicate accepts any field value (string or an already coerced
int/float/bool), never raises, and answers a single yes/no question.
Enumerations are matched case-insensitively.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from pota_adif.fields.tables import (
    ANTENNA_PATHS,
    ALL_SUBMODES,
    ARRL_SECTIONS,
    BAND_RANGES,
    CONTINENTS,
    DXCC_ENTITIES,
    KNOWN_FIELDS,
    MODE_SUBMODES,
    PROPAGATION_MODES,
    QSL_MEDIUMS,
    QSL_RCVD_STATUSES,
    QSL_SENT_STATUSES,
    QSL_VIA,
    QSO_DOWNLOAD_STATUSES,
    QSO_UPLOAD_STATUSES,
)

_LEADING_INT = re.compile(r"^\s*[-+]?\d+")
_LEADING_FLOAT = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")
_NUMERIC = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?\s*$")
_DECIMAL_DEGREES = re.compile(r"^[-+]?\d{1,3}(\.\d+)?$")
_ADIF_LOCATION = re.compile(r"^([NSEW])(\d{3}) (\d{2}\.\d{3})$", re.IGNORECASE)

_POTA_REF = re.compile(r"^[A-Z0-9]{1,3}-\d{4,}(@[A-Z0-9-]+)?$", re.IGNORECASE)
_SOTA_REF = re.compile(r"^[A-Z0-9]+/[A-Z0-9]+-\d{1,3}$", re.IGNORECASE)
_WWFF_REF = re.compile(r"^[A-Z0-9]{1,4}FF-\d{4,}$", re.IGNORECASE)

_GRID_GROUPS = ("[A-R]{2}", "[0-9]{2}", "[A-X]{2}", "[0-9]{2}", "[A-X]{2}", "[0-9]{2}")
_RST_GROUPS = ("[1-5][1-9nx]", "[1-9nx]", "[ackmsx]")


# --- Numeric Coercion ---


def parse_int(value: Any) -> int:
    """Leading integer prefix of ``value``, or 0 when there is none."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(0)) if match else 0


def parse_float(value: Any) -> float:
    """Leading decimal prefix of ``value``, or 0.0 when there is none."""
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_FLOAT.match(str(value))
    return float(match.group(0)) if match else 0.0


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return bool(_NUMERIC.match(str(value)))


def _key(value: Any) -> str:
    return str(value).strip().upper()


# --- Enumerations ---


def is_field(value: Any) -> bool:
    return str(value).strip().lower() in KNOWN_FIELDS


def is_band(value: Any) -> bool:
    return _key(value) in BAND_RANGES


def is_mode(value: Any) -> bool:
    return _key(value) in MODE_SUBMODES


def is_submode(value: Any) -> bool:
    return _key(value) in ALL_SUBMODES


def is_continent(value: Any) -> bool:
    return _key(value) in CONTINENTS


def is_ant_path(value: Any) -> bool:
    return _key(value) in ANTENNA_PATHS


def is_arrl_section(value: Any) -> bool:
    return _key(value) in ARRL_SECTIONS


def is_qso_upload(value: Any) -> bool:
    return _key(value) in QSO_UPLOAD_STATUSES


def is_qso_download(value: Any) -> bool:
    return _key(value) in QSO_DOWNLOAD_STATUSES


def is_qsl_sent(value: Any) -> bool:
    return _key(value) in QSL_SENT_STATUSES


def is_qsl_rcvd(value: Any) -> bool:
    return _key(value) in QSL_RCVD_STATUSES


def is_qsl_via(value: Any) -> bool:
    return _key(value) in QSL_VIA


def is_qsl_medium(value: Any) -> bool:
    return _key(value) in QSL_MEDIUMS


def is_propagation(value: Any) -> bool:
    return _key(value) in PROPAGATION_MODES


def is_dxcc(value: Any) -> bool:
    """DXCC entity code. Non-numeric text coerces to 0, the "None" entity."""
    return parse_int(value) in DXCC_ENTITIES


# --- Bands & Frequencies ---


def band_from_freq(freq: Any) -> str | None:
    """First band, in table order, whose interval contains ``freq`` (MHz)."""
    mhz = parse_float(freq)
    for band, (low, high) in BAND_RANGES.items():
        if low <= mhz <= high:
            return band
    return None


def is_freq(value: Any, band: Any = None) -> bool:
    """Frequency check against ``band`` when it is known, else against any band."""
    mhz = parse_float(value)
    if band:
        bounds = BAND_RANGES.get(_key(band))
        if bounds is not None:
            return bounds[0] <= mhz <= bounds[1]
    return band_from_freq(mhz) is not None


# --- Formats ---


def is_date(value: Any) -> bool:
    """YYYYMMDD with year 1930 through next year. Day is not checked per month."""
    digits = re.sub(r"\D", "", str(value))
    if len(digits) != 8:
        return False
    year, month, day = int(digits[:4]), int(digits[4:6]), int(digits[6:])
    max_year = datetime.now(timezone.utc).year + 1
    return 1930 <= year <= max_year and 1 <= month <= 12 and 1 <= day <= 31


def is_time(value: Any) -> bool:
    """HHMM or HHMMSS."""
    digits = re.sub(r"\D", "", str(value))
    if len(digits) not in (4, 6):
        return False
    hour, minute = int(digits[:2]), int(digits[2:4])
    second = int(digits[4:6]) if len(digits) == 6 else 0
    return hour <= 23 and minute <= 59 and second <= 59


def _is_coordinate(value: Any, limit: float, hemispheres: str) -> bool:
    text = str(value).strip()
    match = _ADIF_LOCATION.match(text)
    if match:
        if match.group(1).upper() not in hemispheres:
            return False
        degrees, minutes = int(match.group(2)), float(match.group(3))
        return minutes < 60 and degrees + minutes / 60 <= limit
    if not _DECIMAL_DEGREES.match(text):
        return False
    return abs(float(text)) <= limit


def is_lat(value: Any) -> bool:
    """Decimal degrees within ±90, or the ADIF ``N045 12.345`` form."""
    return _is_coordinate(value, 90, "NS")


def is_lon(value: Any) -> bool:
    """Decimal degrees within ±180, or the ADIF ``W071 30.000`` form."""
    return _is_coordinate(value, 180, "EW")


def is_maidenhead(value: Any) -> bool:
    """Maidenhead locator of 2 to 12 characters.

    The empty string passes; logs in the wild carry empty grid tags and
    rejecting them would flag otherwise clean records.
    """
    text = str(value)
    if len(text) > 12 or len(text) % 2:
        return False
    pattern = "".join(_GRID_GROUPS[: len(text) // 2])
    return re.fullmatch(pattern, text.upper()) is not None


def is_grid_list(value: Any) -> bool:
    """Comma separated Maidenhead locators, as in VUCC_GRIDS."""
    grids = [grid.strip() for grid in str(value).split(",")]
    return all(grid and is_maidenhead(grid) for grid in grids)


def is_rst(value: Any) -> bool:
    text = str(value).lower()
    if not 2 <= len(text) <= 4:
        return False
    pattern = "".join(_RST_GROUPS[: len(text) - 1])
    return re.fullmatch(pattern, text) is not None


def is_callsign(value: Any) -> bool:
    """Loose callsign shape: at least one letter and one digit, not one repeated character."""
    text = str(value).strip()
    if len(set(text)) < 2:
        return False
    return any(c.isalpha() for c in text) and any(c.isdigit() for c in text)


# --- Program References ---


def is_pota_ref(value: Any) -> bool:
    """Single park reference such as ``US-0001`` or ``US-0001@US-CA``."""
    return _POTA_REF.match(str(value).strip()) is not None


def is_sota_ref(value: Any) -> bool:
    return _SOTA_REF.match(str(value).strip()) is not None


def is_wwff_ref(value: Any) -> bool:
    return _WWFF_REF.match(str(value).strip()) is not None


def is_iota_ref(value: Any) -> bool:
    """Continent code and island group number, as in ``NA-001``."""
    parts = str(value).strip().split("-", 1)
    if len(parts) != 2:
        return False
    return is_continent(parts[0]) and parts[1].isdigit()
