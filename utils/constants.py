# utils/constants.py
from types import MappingProxyType

# ── Harita varsayılanları ─────────────────────────────────────────────────────
DEFAULT_CENTER = (39.7392, -104.9903)  # Denver
DEFAULT_ZOOM   = 12

OSM_TILES = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTR  = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'

# ── Sorgu ─────────────────────────────────────────────────────────────────────
TOP_N_OPTIONS = [5, 10, 15, 20]
DEFAULT_TOP_N = 5
PREDICT_PATH  = "/predict_crimes"

# ── Risk eşikleri (alt sınırlar dahil) ────────────────────────────────────────
HIGH_THRESHOLD   = 0.50
MEDIUM_THRESHOLD = 0.20
LOW_THRESHOLD    = 0.05

# ── Renkler (marker + lejant) ─────────────────────────────────────────────────
RED    = "#dc2626"
ORANGE = "#ea580c"
BLUE   = "#2563eb"
GREEN  = "#16a34a"

# ── class_id → suç kategorisi ─────────────────────────────────────────────────
# Not: crime_type sunucudan gelse de başlıkta bu tablo önceliklidir;
# tabloda olmayan id'ler için crime_type gösterilir.
CRIME_CLASSES = MappingProxyType({
    0:  "Liquor Law Violations",
    1:  "Impersonation",
    2:  "All Other Offenses",
    3:  "Burglary/Breaking & Entering",
    4:  "Credit Card/ATM Fraud",
    5:  "Identity Theft",
    6:  "False Pretenses",
    7:  "Rape",
    8:  "Welfare Fraud",
    9:  "Wire Fraud",
    10: "Theft of Vehicle Parts",
    11: "Family Offenses (Nonviolent)",
    12: "Embezzlement",
    13: "Murder",
    14: "Aggravated Assault",
    15: "Fondling",
    16: "Theft From Vehicle",
    17: "Simple Assault",
    18: "Drug/Narcotic Violations",
    19: "Vandalism",
    20: "Counterfeiting",
    21: "Motor Vehicle Theft",
    22: "Theft From Building",
    23: "Pornography",
    24: "Intimidation",
    25: "All Other Larceny",
    26: "Shoplifting",
    27: "Trespassing",
    28: "DUI",
    29: "Arson",
    30: "Robbery",
    31: "Hacking",
    32: "Weapon Violations",
    33: "Disorderly Conduct",
    34: "Statutory Rape",
    35: "Sodomy",
    36: "Sexual Assault with Object",
    37: "Curfew Violations",
    38: "Stolen Property",
    39: "Coin Machine Theft",
    40: "Animal Cruelty",
    41: "Pocket-picking",
    42: "Drug Equipment Violations",
    43: "Purse-snatching",
    44: "Extortion",
    45: "Gambling Equipment",
    46: "Promoting Gambling",
    47: "Kidnapping",
    48: "Human Trafficking (Servitude)",
    49: "Bad Checks",
    50: "Prostitution",
    51: "Drunkenness",
    52: "Human Trafficking (Sex Acts)",
    53: "Incest",
    54: "Promoting Prostitution",
    55: "Peeping Tom",
    56: "Bribery",
})


def class_label(class_id: int, fallback: str = "") -> str:
    return CRIME_CLASSES.get(class_id) or fallback
