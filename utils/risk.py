# utils/risk.py
from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from utils.constants import (
    HIGH_THRESHOLD, MEDIUM_THRESHOLD, LOW_THRESHOLD,
    RED, ORANGE, BLUE, GREEN,
)


class RiskLevel(str, Enum):
    HIGH     = "Alto"
    MEDIUM   = "Medio"
    LOW      = "Bajo"
    VERY_LOW = "Muy Bajo"


# ── Kademe tablosu: (alt sınır, seviye); yukarıdan aşağı ilk eşleşen kazanır ──
_BUCKETS: List[Tuple[float, RiskLevel]] = [
    (HIGH_THRESHOLD,   RiskLevel.HIGH),
    (MEDIUM_THRESHOLD, RiskLevel.MEDIUM),
    (LOW_THRESHOLD,    RiskLevel.LOW),
]

LEVEL_COLORS: dict[RiskLevel, str] = {
    RiskLevel.HIGH:     RED,
    RiskLevel.MEDIUM:   ORANGE,
    RiskLevel.LOW:      BLUE,
    RiskLevel.VERY_LOW: GREEN,
}

# rozet: (arka plan, yazı)
_BADGE: dict[RiskLevel, Tuple[str, str]] = {
    RiskLevel.HIGH:     ("#fee2e2", "#991b1b"),
    RiskLevel.MEDIUM:   ("#ffedd5", "#9a3412"),
    RiskLevel.LOW:      ("#dbeafe", "#1e40af"),
    RiskLevel.VERY_LOW: ("#dcfce7", "#166534"),
}

_LEGEND_RANGES: dict[RiskLevel, str] = {
    RiskLevel.HIGH:     "≥50%",
    RiskLevel.MEDIUM:   "20-50%",
    RiskLevel.LOW:      "5-20%",
    RiskLevel.VERY_LOW: "<5%",
}


def risk_level(probability: float) -> RiskLevel:
    """Olasılığı risk seviyesine çevirir. [0,1] dışı değerler uç kademelere düşer."""
    for lower, level in _BUCKETS:
        if probability >= lower:
            return level
    return RiskLevel.VERY_LOW


def color_for_probability(probability: float) -> str:
    # renk seviyeden türetilir → ikisi asla ayrışmaz
    return LEVEL_COLORS[risk_level(probability)]


def badge_style(level: RiskLevel) -> Tuple[str, str]:
    return _BADGE[level]


def legend_items() -> List[Tuple[str, str]]:
    """[(renk, 'Alto (≥50%)'), ...], yüksekten düşüğe."""
    return [(LEVEL_COLORS[lvl], f"{lvl.value} ({_LEGEND_RANGES[lvl]})") for lvl in RiskLevel]


def format_probability(probability: float) -> str:
    return f"{probability * 100:.2f}%"
