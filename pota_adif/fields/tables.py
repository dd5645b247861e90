"""ADIF field tables: the immutable domain data every pipeline stage consults.

All tables are module-level constants built once at import time and never
mutated. Enumerations are keyed by their upper-cased ADIF code so lookups
can normalize input with a single ``.upper()``.
"""

from __future__ import annotations

from types import MappingProxyType

# --- Field Registry ---

KNOWN_FIELDS: frozenset[str] = frozenset(
    {
        "address", "address_intl", "age", "altitude", "ant_az", "ant_el", "ant_path",
        "arrl_sect", "award_granted", "award_submitted", "a_index", "band", "band_rx",
        "call", "check", "class", "clublog_qso_upload_date", "clublog_qso_upload_status",
        "cnty", "cnty_alt", "comment", "comment_intl", "cont", "contacted_op",
        "contest_id", "country", "country_intl", "cqz", "credit_submitted",
        "credit_granted", "darc_dok", "dcl_qslrdate", "dcl_qslsdate", "dcl_qsl_rcvd",
        "dcl_qsl_sent", "distance", "dxcc", "email", "eq_call", "eqsl_qslrdate",
        "eqsl_qslsdate", "eqsl_qsl_rcvd", "eqsl_qsl_sent", "fists", "fists_cc",
        "force_init", "freq", "freq_rx", "gridsquare", "gridsquare_ext", "guest_op",
        "hamlogeu_qso_upload_date", "hamlogeu_qso_upload_status", "hamqth_qso_upload_date",
        "hamqth_qso_upload_status", "hrdlog_qso_upload_date", "hrdlog_qso_upload_status",
        "iota", "iota_island_id", "ituz", "k_index", "lat", "lon", "lotw_qslrdate",
        "lotw_qslsdate", "lotw_qsl_rcvd", "lotw_qsl_sent", "max_bursts", "mode",
        "morse_key_info", "morse_key_type", "ms_shower", "my_altitude", "my_antenna",
        "my_antenna_intl", "my_arrl_sect", "my_city", "my_city_intl", "my_cnty",
        "my_cnty_alt", "my_country", "my_country_intl", "my_cq_zone", "my_darc_dok",
        "my_dxcc", "my_fists", "my_gridsquare", "my_gridsquare_ext", "my_iota",
        "my_iota_island_id", "my_itu_zone", "my_lat", "my_lon", "my_morse_key_info",
        "my_morse_key_type", "my_name", "my_name_intl", "my_postal_code",
        "my_postal_code_intl", "my_pota_ref", "my_rig", "my_rig_intl", "my_sig",
        "my_sig_intl", "my_sig_info", "my_sig_info_intl", "my_sota_ref", "my_state",
        "my_street", "my_street_intl", "my_usaca_counties", "my_vucc_grids",
        "my_wwff_ref", "name", "name_intl", "notes", "notes_intl", "nr_bursts",
        "nr_pings", "operator", "owner_callsign", "pfx", "pota_ref", "precedence",
        "prop_mode", "public_key", "qrzcom_qso_download_date", "qrzcom_qso_download_status",
        "qrzcom_qso_upload_date", "qrzcom_qso_upload_status", "qslmsg", "qslmsg_intl",
        "qslmsg_rcvd", "qslrdate", "qslsdate", "qsl_rcvd", "qsl_rcvd_via", "qsl_sent",
        "qsl_sent_via", "qsl_via", "qso_complete", "qso_date", "qso_date_off",
        "qso_random", "qth", "qth_intl", "region", "rig", "rig_intl", "rst_rcvd",
        "rst_sent", "rx_pwr", "sat_mode", "sat_name", "sfi", "sig", "sig_intl",
        "sig_info", "sig_info_intl", "silent_key", "skcc", "sota_ref", "srx",
        "srx_string", "state", "station_callsign", "stx", "stx_string", "submode",
        "swl", "ten_ten", "time_off", "time_on", "tx_pwr", "uksmg", "usaca_counties",
        "ve_prov", "vucc_grids", "web", "wwff_ref",
    }
)

# Fields synthesized by the POTA reference unroll. Not ADIF fields.
POTA_DERIVED_FIELDS: tuple[str, ...] = (
    "pota_my_park_ref",
    "pota_my_location",
    "pota_park_ref",
    "pota_location",
    "pota_unrolled_from_rec",
)

DATE_FIELDS: tuple[str, ...] = (
    "clublog_qso_upload_date",
    "dcl_qslrdate",
    "dcl_qslsdate",
    "eqsl_qslrdate",
    "eqsl_qslsdate",
    "hamlogeu_qso_upload_date",
    "hamqth_qso_upload_date",
    "hrdlog_qso_upload_date",
    "lotw_qslrdate",
    "lotw_qslsdate",
    "qrzcom_qso_download_date",
    "qrzcom_qso_upload_date",
    "qslrdate",
    "qslsdate",
    "qso_date",
    "qso_date_off",
)

TIME_FIELDS: tuple[str, ...] = ("time_on", "time_off")

QSO_UPLOAD_STATUS_FIELDS: tuple[str, ...] = (
    "clublog_qso_upload_status",
    "hamlogeu_qso_upload_status",
    "hamqth_qso_upload_status",
    "hrdlog_qso_upload_status",
    "qrzcom_qso_upload_status",
)

QSO_DOWNLOAD_STATUS_FIELDS: tuple[str, ...] = ("qrzcom_qso_download_status",)

QSL_RCVD_FIELDS: tuple[str, ...] = ("dcl_qsl_rcvd", "eqsl_qsl_rcvd", "lotw_qsl_rcvd", "qsl_rcvd")

QSL_SENT_FIELDS: tuple[str, ...] = ("dcl_qsl_sent", "eqsl_qsl_sent", "lotw_qsl_sent", "qsl_sent")

# --- Bands ---

# Band name -> (low MHz, high MHz). Order matters: band_from_freq returns the
# first band whose interval contains the frequency.
BAND_RANGES: MappingProxyType[str, tuple[float, float]] = MappingProxyType(
    {
        "1.25CM": (24000.0, 24250.0),
        "1.25M": (222.0, 225.0),
        "10M": (28.0, 29.7),
        "12M": (24.89, 24.99),
        "13CM": (2300.0, 2450.0),
        "15M": (21.0, 21.45),
        "160M": (1.8, 2.0),
        "17M": (18.068, 18.168),
        "1MM": (241000.0, 250000.0),
        "2.5MM": (119980.0, 123000.0),
        "20M": (14.0, 14.35),
        "2190M": (0.1357, 0.1378),
        "23CM": (1240.0, 1300.0),
        "2M": (144.0, 148.0),
        "2MM": (134000.0, 149000.0),
        "30M": (10.1, 10.15),
        "33CM": (902.0, 928.0),
        "3CM": (10000.0, 10500.0),
        "40M": (7.0, 7.3),
        "4M": (70.0, 71.0),
        "4MM": (75500.0, 81000.0),
        "560M": (0.501, 0.503),
        "60M": (5.06, 5.45),
        "630M": (0.472, 0.479),
        "6CM": (5650.0, 5925.0),
        "6M": (50.0, 54.0),
        "6MM": (47000.0, 47200.0),
        "70CM": (420.0, 450.0),
        "80M": (3.5, 4.0),
        "9CM": (3300.0, 3500.0),
        "SUBMM": (300000.0, 7500000.0),
        "5M": (54.000001, 69.9),
        "8M": (40.0, 45.0),
    }
)

# --- Modes ---

MODE_SUBMODES: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {
        "AM": frozenset(),
        "ARDOP": frozenset(),
        "ATV": frozenset(),
        "CHIP": frozenset({"CHIP64", "CHIP128"}),
        "CLO": frozenset(),
        "CONTESTI": frozenset(),
        "CW": frozenset({"PCW"}),
        "DIGITALVOICE": frozenset({"C4FM", "DMR", "DSTAR", "FREEDV", "M17"}),
        "DOMINO": frozenset(
            {"DOM-M", "DOM4", "DOM5", "DOM8", "DOM11", "DOM16", "DOM22", "DOM44", "DOM88",
             "DOMINOEX", "DOMINOF"}
        ),
        "DYNAMIC": frozenset({"VARA HF", "VARA SATELLITE", "VARA FM 1200", "VARA FM 9600"}),
        "FAX": frozenset(),
        "FM": frozenset(),
        "FSK441": frozenset(),
        "FT8": frozenset(),
        "HELL": frozenset(
            {"FMHELL", "FSKHELL", "HELL80", "HELLX5", "HELLX9", "HFSK", "PSKHELL", "SLOWHELL"}
        ),
        "ISCAT": frozenset({"ISCAT-A", "ISCAT-B"}),
        "JT4": frozenset({"JT4A", "JT4B", "JT4C", "JT4D", "JT4E", "JT4F", "JT4G"}),
        "JT6M": frozenset(),
        "JT9": frozenset(
            {"JT9-1", "JT9-2", "JT9-5", "JT9-10", "JT9-30", "JT9A", "JT9B", "JT9C", "JT9D",
             "JT9E", "JT9E FAST", "JT9F", "JT9F FAST", "JT9G", "JT9G FAST", "JT9H",
             "JT9H FAST"}
        ),
        "JT44": frozenset(),
        "JT65": frozenset({"JT65A", "JT65B", "JT65B2", "JT65C", "JT65C2"}),
        "MFSK": frozenset(
            {"FSQCALL", "FST4", "FST4W", "FT4", "JS8", "JTMS", "MFSK4", "MFSK8", "MFSK11",
             "MFSK16", "MFSK22", "MFSK31", "MFSK32", "MFSK64", "MFSK64L", "MFSK128",
             "MFSK128L", "Q65"}
        ),
        "MSK144": frozenset(),
        "MT63": frozenset(),
        "OLIVIA": frozenset(
            {"OLIVIA 4/125", "OLIVIA 4/250", "OLIVIA 8/250", "OLIVIA 8/500",
             "OLIVIA 16/500", "OLIVIA 16/1000", "OLIVIA 32/1000"}
        ),
        "OPERA": frozenset({"OPERA-BEACON", "OPERA-QSO"}),
        "PAC": frozenset({"PAC2", "PAC3", "PAC4"}),
        "PAX": frozenset({"PAX2"}),
        # Not ADIF. Accepted for logs produced by legacy POTA importers.
        "PHONE": frozenset(),
        "PKT": frozenset(),
        "PSK": frozenset(
            {"8PSK125", "8PSK125F", "8PSK125FL", "8PSK250", "8PSK250F", "8PSK250FL",
             "8PSK500", "8PSK500F", "8PSK1000", "8PSK1000F", "8PSK1200F", "FSK31", "PSK10",
             "PSK31", "PSK63", "PSK63F", "PSK63RC4", "PSK63RC5", "PSK63RC10", "PSK63RC20",
             "PSK63RC32", "PSK125", "PSK125C12", "PSK125R", "PSK125RC10", "PSK125RC12",
             "PSK125RC16", "PSK125RC4", "PSK125RC5", "PSK250", "PSK250C6", "PSK250R",
             "PSK250RC2", "PSK250RC3", "PSK250RC5", "PSK250RC6", "PSK250RC7", "PSK500",
             "PSK500C2", "PSK500C4", "PSK500R", "PSK500RC2", "PSK500RC3", "PSK500RC4",
             "PSK800C2", "PSK800RC2", "PSK1000", "PSK1000C2", "PSK1000R", "PSK1000RC2",
             "PSKAM10", "PSKAM31", "PSKAM50", "PSKFEC31", "QPSK31", "QPSK63", "QPSK125",
             "QPSK250", "QPSK500", "SIM31"}
        ),
        "PSK2K": frozenset(),
        "Q15": frozenset(),
        "QRA64": frozenset({"QRA64A", "QRA64B", "QRA64C", "QRA64D", "QRA64E"}),
        "ROS": frozenset({"ROS-EME", "ROS-HF", "ROS-MF"}),
        "RTTY": frozenset({"ASCI"}),
        "RTTYM": frozenset(),
        "SSB": frozenset({"LSB", "USB"}),
        "SSTV": frozenset(),
        "T10": frozenset(),
        "THOR": frozenset(
            {"THOR-M", "THOR4", "THOR5", "THOR8", "THOR11", "THOR16", "THOR22", "THOR25X4",
             "THOR50X1", "THOR50X2", "THOR100"}
        ),
        "THRB": frozenset(
            {"THRBX", "THRBX1", "THRBX2", "THRBX4", "THROB1", "THROB2", "THROB4"}
        ),
        "TOR": frozenset({"AMTORFEC", "GTOR", "NAVTEX", "SITORB"}),
        "V4": frozenset(),
        "VOI": frozenset(),
        "WINMOR": frozenset(),
        "WSPR": frozenset(),
    }
)

ALL_SUBMODES: frozenset[str] = frozenset().union(*MODE_SUBMODES.values())

# --- Enumerations ---

CONTINENTS: MappingProxyType[str, str] = MappingProxyType(
    {
        "NA": "North America",
        "SA": "South America",
        "EU": "Europe",
        "AF": "Africa",
        "OC": "Oceania",
        "AS": "Asia",
        "AN": "Antarctica",
    }
)

ANTENNA_PATHS: MappingProxyType[str, str] = MappingProxyType(
    {"G": "grayline", "O": "other", "S": "short path", "L": "long path"}
)

ARRL_SECTIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "AL": "Alabama", "AK": "Alaska", "AB": "Alberta", "AR": "Arkansas", "AZ": "Arizona",
        "BC": "British Columbia", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
        "EB": "East Bay", "EMA": "Eastern Massachusetts", "ENY": "Eastern New York",
        "EPA": "Eastern Pennsylvania", "EWA": "Eastern Washington", "GA": "Georgia",
        "GH": "Golden Horseshoe", "ID": "Idaho", "IL": "Illinois", "IN": "Indiana",
        "IA": "Iowa", "KS": "Kansas", "KY": "Kentucky", "LAX": "Los Angeles",
        "LA": "Louisiana", "ME": "Maine", "MB": "Manitoba", "MDC": "Maryland-DC",
        "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi", "MO": "Missouri",
        "MT": "Montana", "NE": "Nebraska", "NV": "Nevada", "NB": "New Brunswick",
        "NH": "New Hampshire", "NM": "New Mexico", "NLI": "New York City-Long Island",
        "NL": "Newfoundland/Labrador", "NC": "North Carolina", "ND": "North Dakota",
        "NTX": "North Texas", "NFL": "Northern Florida", "NNJ": "Northern New Jersey",
        "NNY": "Northern New York", "NS": "Nova Scotia", "OH": "Ohio", "OK": "Oklahoma",
        "ONE": "Ontario East", "ONN": "Ontario North", "ONS": "Ontario South",
        "ORG": "Orange", "OR": "Oregon", "PAC": "Pacific", "PE": "Prince Edward Island",
        "PR": "Puerto Rico", "QC": "Quebec", "RI": "Rhode Island",
        "SV": "Sacramento Valley", "SDG": "San Diego", "SF": "San Francisco",
        "SJV": "San Joaquin Valley", "SB": "Santa Barbara", "SCV": "Santa Clara Valley",
        "SK": "Saskatchewan", "SC": "South Carolina", "SD": "South Dakota",
        "STX": "South Texas", "SFL": "Southern Florida", "SNJ": "Southern New Jersey",
        "TN": "Tennessee", "TER": "Territories", "VI": "US Virgin Islands", "UT": "Utah",
        "VT": "Vermont", "VA": "Virginia", "WCF": "West Central Florida",
        "WTX": "West Texas", "WV": "West Virginia", "WMA": "Western Massachusetts",
        "WNY": "Western New York", "WPA": "Western Pennsylvania",
        "WWA": "Western Washington", "WI": "Wisconsin", "WY": "Wyoming",
    }
)

QSO_UPLOAD_STATUSES: MappingProxyType[str, str] = MappingProxyType(
    {"Y": "uploaded/accepted", "N": "not uploaded", "M": "modified"}
)

QSO_DOWNLOAD_STATUSES: MappingProxyType[str, str] = MappingProxyType(
    {"Y": "downloaded", "N": "not downloaded", "I": "ignore/invalid"}
)

QSL_SENT_STATUSES: MappingProxyType[str, str] = MappingProxyType(
    {"Y": "yes", "N": "no", "R": "requested", "Q": "queued", "I": "ignore/invalid"}
)

QSL_RCVD_STATUSES: MappingProxyType[str, str] = MappingProxyType(
    {"Y": "yes", "N": "no", "R": "requested", "V": "verified", "I": "ignore/invalid"}
)

QSL_VIA: MappingProxyType[str, str] = MappingProxyType(
    {"B": "bureau", "D": "direct", "E": "electronic", "M": "manager"}
)

QSL_MEDIUMS: MappingProxyType[str, str] = MappingProxyType(
    {"CARD": "paper QSL card", "EQSL": "eQSL.cc", "LOTW": "ARRL Logbook of the World"}
)

PROPAGATION_MODES: MappingProxyType[str, str] = MappingProxyType(
    {
        "AS": "Aircraft Scatter",
        "AUE": "Aurora-E",
        "AUR": "Aurora",
        "BS": "Back scatter",
        "ECH": "EchoLink",
        "EME": "Earth-Moon-Earth",
        "ES": "Sporadic E",
        "F2": "F2 Reflection",
        "FAI": "Field Aligned Irregularities",
        "GWAVE": "Ground Wave",
        "INTERNET": "Internet-assisted",
        "ION": "Ionoscatter",
        "IRL": "IRLP",
        "LOS": "Line of Sight",
        "MS": "Meteor scatter",
        "RPT": "Terrestrial or atmospheric repeater or transponder",
        "RS": "Rain scatter",
        "SAT": "Satellite",
        "TEP": "Trans-equatorial",
        "TR": "Tropospheric ducting",
    }
)

# --- DXCC Entities ---

DXCC_ENTITIES: MappingProxyType[int, str] = MappingProxyType(
    {
        0: "None",
        1: "CANADA",
        3: "AFGHANISTAN",
        4: "AGALEGA & ST. BRANDON IS.",
        5: "ALAND IS.",
        6: "ALASKA",
        7: "ALBANIA",
        9: "AMERICAN SAMOA",
        10: "AMSTERDAM & ST. PAUL IS.",
        11: "ANDAMAN & NICOBAR IS.",
        12: "ANGUILLA",
        13: "ANTARCTICA",
        14: "ARMENIA",
        15: "ASIATIC RUSSIA",
        16: "NEW ZEALAND SUBANTARCTIC ISLANDS",
        17: "AVES I.",
        18: "AZERBAIJAN",
        20: "BAKER & HOWLAND IS.",
        21: "BALEARIC IS.",
        22: "PALAU",
        24: "BOUVET",
        27: "BELARUS",
        29: "CANARY IS.",
        31: "C. KIRIBATI (BRITISH PHOENIX IS.)",
        32: "CEUTA & MELILLA",
        33: "CHAGOS IS.",
        34: "CHATHAM IS.",
        35: "CHRISTMAS I.",
        36: "CLIPPERTON I.",
        37: "COCOS I.",
        38: "COCOS (KEELING) IS.",
        40: "CRETE",
        41: "CROZET I.",
        43: "DESECHEO I.",
        45: "DODECANESE",
        46: "EAST MALAYSIA",
        47: "EASTER I.",
        48: "E. KIRIBATI (LINE IS.)",
        49: "EQUATORIAL GUINEA",
        50: "MEXICO",
        51: "ERITREA",
        52: "ESTONIA",
        53: "ETHIOPIA",
        54: "EUROPEAN RUSSIA",
        56: "FERNANDO DE NORONHA",
        60: "BAHAMAS",
        61: "FRANZ JOSEF LAND",
        62: "BARBADOS",
        63: "FRENCH GUIANA",
        64: "BERMUDA",
        65: "BRITISH VIRGIN IS.",
        66: "BELIZE",
        69: "CAYMAN IS.",
        70: "CUBA",
        71: "GALAPAGOS IS.",
        72: "DOMINICAN REPUBLIC",
        74: "EL SALVADOR",
        75: "GEORGIA",
        76: "GUATEMALA",
        77: "GRENADA",
        78: "HAITI",
        79: "GUADELOUPE",
        80: "HONDURAS",
        82: "JAMAICA",
        84: "MARTINIQUE",
        86: "NICARAGUA",
        88: "PANAMA",
        89: "TURKS & CAICOS IS.",
        90: "TRINIDAD & TOBAGO",
        91: "ARUBA",
        94: "ANTIGUA & BARBUDA",
        95: "DOMINICA",
        96: "MONTSERRAT",
        97: "ST. LUCIA",
        98: "ST. VINCENT",
        99: "GLORIOSO IS.",
        100: "ARGENTINA",
        103: "GUAM",
        104: "BOLIVIA",
        105: "GUANTANAMO BAY",
        106: "GUERNSEY",
        107: "GUINEA",
        108: "BRAZIL",
        109: "GUINEA-BISSAU",
        110: "HAWAII",
        111: "HEARD I.",
        112: "CHILE",
        114: "ISLE OF MAN",
        116: "COLOMBIA",
        117: "ITU HQ",
        118: "JAN MAYEN",
        120: "ECUADOR",
        122: "JERSEY",
        123: "JOHNSTON I.",
        124: "JUAN DE NOVA, EUROPA",
        125: "JUAN FERNANDEZ IS.",
        126: "KALININGRAD",
        129: "GUYANA",
        130: "KAZAKHSTAN",
        131: "KERGUELEN IS.",
        132: "PARAGUAY",
        133: "KERMADEC IS.",
        135: "KYRGYZSTAN",
        136: "PERU",
        137: "REPUBLIC OF KOREA",
        138: "KURE I.",
        140: "SURINAME",
        141: "FALKLAND IS.",
        142: "LAKSHADWEEP IS.",
        143: "LAOS",
        144: "URUGUAY",
        145: "LATVIA",
        146: "LITHUANIA",
        147: "LORD HOWE I.",
        148: "VENEZUELA",
        149: "AZORES",
        150: "AUSTRALIA",
        152: "MACAO",
        153: "MACQUARIE I.",
        157: "NAURU",
        158: "VANUATU",
        159: "MALDIVES",
        160: "TONGA",
        161: "MALPELO I.",
        162: "NEW CALEDONIA",
        163: "PAPUA NEW GUINEA",
        165: "MAURITIUS",
        166: "MARIANA IS.",
        167: "MARKET REEF",
        168: "MARSHALL IS.",
        169: "MAYOTTE",
        170: "NEW ZEALAND",
        171: "MELLISH REEF",
        172: "PITCAIRN I.",
        173: "MICRONESIA",
        174: "MIDWAY I.",
        175: "FRENCH POLYNESIA",
        176: "FIJI",
        177: "MINAMI TORISHIMA",
        179: "MOLDOVA",
        180: "MOUNT ATHOS",
        181: "MOZAMBIQUE",
        182: "NAVASSA I.",
        185: "SOLOMON IS.",
        187: "NIGER",
        188: "NIUE",
        189: "NORFOLK I.",
        190: "SAMOA",
        191: "NORTH COOK IS.",
        192: "OGASAWARA",
        195: "ANNOBON I.",
        197: "PALMYRA & JARVIS IS.",
        199: "PETER 1 I.",
        201: "PRINCE EDWARD & MARION IS.",
        202: "PUERTO RICO",
        203: "ANDORRA",
        204: "REVILLAGIGEDO",
        205: "ASCENSION I.",
        206: "AUSTRIA",
        207: "RODRIGUES I.",
        209: "BELGIUM",
        211: "SABLE I.",
        212: "BULGARIA",
        213: "SAINT MARTIN",
        214: "CORSICA",
        215: "CYPRUS",
        216: "SAN ANDRES & PROVIDENCIA",
        217: "SAN FELIX & SAN AMBROSIO",
        219: "SAO TOME & PRINCIPE",
        221: "DENMARK",
        222: "FAROE IS.",
        223: "ENGLAND",
        224: "FINLAND",
        225: "SARDINIA",
        227: "FRANCE",
        230: "FEDERAL REPUBLIC OF GERMANY",
        232: "SOMALIA",
        233: "GIBRALTAR",
        234: "SOUTH COOK IS.",
        235: "SOUTH GEORGIA I.",
        236: "GREECE",
        237: "GREENLAND",
        238: "SOUTH ORKNEY IS.",
        239: "HUNGARY",
        240: "SOUTH SANDWICH IS.",
        241: "SOUTH SHETLAND IS.",
        242: "ICELAND",
        245: "IRELAND",
        246: "SOVEREIGN MILITARY ORDER OF MALTA",
        247: "SPRATLY IS.",
        248: "ITALY",
        249: "ST. KITTS & NEVIS",
        250: "ST. HELENA",
        251: "LIECHTENSTEIN",
        252: "ST. PAUL I.",
        253: "ST. PETER & ST. PAUL ROCKS",
        254: "LUXEMBOURG",
        256: "MADEIRA IS.",
        257: "MALTA",
        259: "SVALBARD",
        260: "MONACO",
        262: "TAJIKISTAN",
        263: "NETHERLANDS",
        265: "NORTHERN IRELAND",
        266: "NORWAY",
        269: "POLAND",
        270: "TOKELAU IS.",
        272: "PORTUGAL",
        273: "TRINDADE & MARTIM VAZ IS.",
        274: "TRISTAN DA CUNHA & GOUGH I.",
        275: "ROMANIA",
        276: "TROMELIN I.",
        277: "ST. PIERRE & MIQUELON",
        278: "SAN MARINO",
        279: "SCOTLAND",
        280: "TURKMENISTAN",
        281: "SPAIN",
        282: "TUVALU",
        283: "UK SOVEREIGN BASE AREAS ON CYPRUS",
        284: "SWEDEN",
        285: "VIRGIN IS.",
        286: "UGANDA",
        287: "SWITZERLAND",
        288: "UKRAINE",
        289: "UNITED NATIONS HQ",
        291: "UNITED STATES OF AMERICA",
        292: "UZBEKISTAN",
        293: "VIET NAM",
        294: "WALES",
        295: "VATICAN",
        296: "SERBIA",
        297: "WAKE I.",
        298: "WALLIS & FUTUNA IS.",
        299: "WEST MALAYSIA",
        301: "W. KIRIBATI (GILBERT IS. )",
        302: "WESTERN SAHARA",
        303: "WILLIS I.",
        304: "BAHRAIN",
        305: "BANGLADESH",
        306: "BHUTAN",
        308: "COSTA RICA",
        309: "MYANMAR",
        312: "CAMBODIA",
        315: "SRI LANKA",
        318: "CHINA",
        321: "HONG KONG",
        324: "INDIA",
        327: "INDONESIA",
        330: "IRAN",
        333: "IRAQ",
        336: "ISRAEL",
        339: "JAPAN",
        342: "JORDAN",
        344: "DEMOCRATIC PEOPLE'S REP. OF KOREA",
        345: "BRUNEI DARUSSALAM",
        348: "KUWAIT",
        354: "LEBANON",
        363: "MONGOLIA",
        369: "NEPAL",
        370: "OMAN",
        372: "PAKISTAN",
        375: "PHILIPPINES",
        376: "QATAR",
        378: "SAUDI ARABIA",
        379: "SEYCHELLES",
        381: "SINGAPORE",
        382: "DJIBOUTI",
        384: "SYRIA",
        386: "TAIWAN",
        387: "THAILAND",
        390: "TURKEY",
        391: "UNITED ARAB EMIRATES",
        400: "ALGERIA",
        401: "ANGOLA",
        402: "BOTSWANA",
        404: "BURUNDI",
        406: "CAMEROON",
        408: "CENTRAL AFRICA",
        409: "CAPE VERDE",
        410: "CHAD",
        411: "COMOROS",
        412: "REPUBLIC OF THE CONGO",
        414: "DEMOCRATIC REPUBLIC OF THE CONGO",
        416: "BENIN",
        420: "GABON",
        422: "THE GAMBIA",
        424: "GHANA",
        428: "COTE D'IVOIRE",
        430: "KENYA",
        432: "LESOTHO",
        434: "LIBERIA",
        436: "LIBYA",
        438: "MADAGASCAR",
        440: "MALAWI",
        442: "MALI",
        444: "MAURITANIA",
        446: "MOROCCO",
        450: "NIGERIA",
        452: "ZIMBABWE",
        453: "REUNION I.",
        454: "RWANDA",
        456: "SENEGAL",
        458: "SIERRA LEONE",
        460: "ROTUMA I.",
        462: "REPUBLIC OF SOUTH AFRICA",
        464: "NAMIBIA",
        466: "SUDAN",
        468: "KINGDOM OF ESWATINI",
        470: "TANZANIA",
        474: "TUNISIA",
        478: "EGYPT",
        480: "BURKINA FASO",
        482: "ZAMBIA",
        483: "TOGO",
        489: "CONWAY REEF",
        490: "BANABA I. (OCEAN I.)",
        492: "YEMEN",
        497: "CROATIA",
        499: "SLOVENIA",
        501: "BOSNIA-HERZEGOVINA",
        502: "NORTH MACEDONIA (REPUBLIC OF)",
        503: "CZECH REPUBLIC",
        504: "SLOVAK REPUBLIC",
        505: "PRATAS I.",
        506: "SCARBOROUGH REEF",
        507: "TEMOTU PROVINCE",
        508: "AUSTRAL I.",
        509: "MARQUESAS IS.",
        510: "PALESTINE",
        511: "TIMOR-LESTE",
        512: "CHESTERFIELD IS.",
        513: "DUCIE I.",
        514: "MONTENEGRO",
        515: "SWAINS I.",
        516: "SAINT BARTHELEMY",
        517: "CURACAO",
        518: "SINT MAARTEN",
        519: "SABA & ST. EUSTATIUS",
        520: "BONAIRE",
        521: "SOUTH SUDAN (REPUBLIC OF)",
        522: "REPUBLIC OF KOSOVO",
    }
)

# --- POTA Field Sets ---

BASE_REQUIRED_FIELDS: tuple[str, ...] = ("band", "call", "mode", "operator", "qso_date", "time_on")

POTA_REQUIRED_FIELDS: tuple[str, ...] = BASE_REQUIRED_FIELDS + ("pota_my_park_ref",)

POTA_FIELDS: frozenset[str] = frozenset(
    {
        "band", "band_rx", "call", "cnty", "freq", "freq_rx", "gridsquare", "mode",
        "my_antenna", "my_gridsquare", "my_lat", "my_lon", "my_pota_ref", "my_rig",
        "my_sig", "my_sig_info", "my_state", "operator", "pota_ref", "qso_date",
        "rst_rcvd", "rst_sent", "rx_pwr", "sat_mode", "sat_name", "sig", "sig_info",
        "state", "station_callsign", "submode", "time_on", "tx_pwr",
    }
)

# In POTA mode an invalid value in one of these fields is dropped from the
# record instead of flagging the record.
POTA_OPTIONAL_FIELDS: frozenset[str] = (
    KNOWN_FIELDS | frozenset({"pota_park_ref", "pota_location", "pota_my_location"})
) - frozenset(POTA_REQUIRED_FIELDS) - frozenset({"station_callsign"})

# Concatenated in this order to fingerprint a record for duplicate detection.
UNIQUE_KEY_FIELDS: tuple[str, ...] = (
    "band",
    "call",
    "mode",
    "my_pota_ref",
    "my_sig_info",
    "operator",
    "pota_ref",
    "qso_date",
    "sig_info",
    "submode",
)
