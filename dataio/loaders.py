# dataio/loaders.py
from __future__ import annotations

# --- imports ---
import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Tuple

import pandas as pd
import requests

from dataio.errors import ParseError, ResponseError, TransportError
from utils.constants import PREDICT_PATH, class_label
from utils.risk import RiskLevel, color_for_probability, risk_level

LOG = logging.getLogger(__name__)

# --- schema ---
REQUIRED_FIELDS = (
    "date", "spatial_cluster", "latitude", "longitude",
    "class_id", "crime_type", "probability",
)

FETCH_FAILED_MSG = "Error al obtener predicciones"


@dataclass(frozen=True)
class PredictionRecord:
    date: datetime
    spatial_cluster: int
    latitude: float
    longitude: float
    class_id: int
    crime_type: str
    probability: float

    @property
    def position(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)

    @property
    def risk_level(self) -> RiskLevel:
        return risk_level(self.probability)

    @property
    def color(self) -> str:
        return color_for_probability(self.probability)

    @property
    def title(self) -> str:
        return class_label(self.class_id, self.crime_type)


# ===================== parsing =====================

def _as_int(value: Any, field: str, idx: int) -> int:
    if isinstance(value, bool):
        raise ParseError(f"Respuesta inválida: '{field}' no es entero (registro {idx})")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ParseError(f"Respuesta inválida: '{field}' no es entero (registro {idx})")


def _as_float(value: Any, field: str, idx: int) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"Respuesta inválida: '{field}' no es numérico (registro {idx})")
    out = float(value)
    if not math.isfinite(out):
        raise ParseError(f"Respuesta inválida: '{field}' no es finito (registro {idx})")
    return out


def _as_datetime(value: Any, idx: int) -> datetime:
    if not isinstance(value, str) or not value.strip():
        raise ParseError(f"Respuesta inválida: 'date' vacío (registro {idx})")
    try:
        ts = pd.to_datetime(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise ParseError(f"Respuesta inválida: fecha '{value}' ilegible (registro {idx})") from e
    if pd.isna(ts):
        raise ParseError(f"Respuesta inválida: fecha '{value}' ilegible (registro {idx})")
    return ts.to_pydatetime()


def _parse_record(item: Any, idx: int) -> PredictionRecord:
    if not isinstance(item, dict):
        raise ParseError(f"Respuesta inválida: el registro {idx} no es un objeto")
    missing = [f for f in REQUIRED_FIELDS if f not in item]
    if missing:
        raise ParseError(f"Respuesta inválida: faltan campos {', '.join(missing)} (registro {idx})")
    crime_type = item["crime_type"]
    if not isinstance(crime_type, str):
        raise ParseError(f"Respuesta inválida: 'crime_type' no es texto (registro {idx})")
    return PredictionRecord(
        date=_as_datetime(item["date"], idx),
        spatial_cluster=_as_int(item["spatial_cluster"], "spatial_cluster", idx),
        latitude=_as_float(item["latitude"], "latitude", idx),
        longitude=_as_float(item["longitude"], "longitude", idx),
        class_id=_as_int(item["class_id"], "class_id", idx),
        crime_type=crime_type,
        probability=_as_float(item["probability"], "probability", idx),
    )


def parse_predictions(payload: Any) -> List[PredictionRecord]:
    """JSON gövdesini (liste) PredictionRecord listesine çevirir; şekil bozuksa ParseError."""
    if not isinstance(payload, list):
        raise ParseError("Respuesta inválida: se esperaba una lista de predicciones")
    return [_parse_record(item, i) for i, item in enumerate(payload)]


def predictions_to_frame(records: List[PredictionRecord]) -> pd.DataFrame:
    """Detay tablosu (st.dataframe sütun başlığından sıralanabilir)."""
    cols = ["Crimen", "Probabilidad (%)", "Nivel de Riesgo", "Cluster",
            "Latitud", "Longitud", "Fecha"]
    if not records:
        return pd.DataFrame(columns=cols)
    rows = [{
        "Crimen": r.title,
        "Probabilidad (%)": round(r.probability * 100, 2),
        "Nivel de Riesgo": r.risk_level.value,
        "Cluster": r.spatial_cluster,
        "Latitud": round(r.latitude, 4),
        "Longitud": round(r.longitude, 4),
        "Fecha": r.date,
    } for r in records]
    return pd.DataFrame(rows, columns=cols)


# ===================== HTTP =====================

class PredictionClient:
    """GET {base_url}/predict_crimes?datetime_str=...&top_n=...; tek istek, yeniden deneme yok."""

    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{PREDICT_PATH}"

    def fetch(self, datetime_str: str, top_n: int) -> List[PredictionRecord]:
        params = {"datetime_str": datetime_str, "top_n": int(top_n)}
        LOG.info("▶ GET %s params=%s", self.endpoint, params)
        try:
            r = self.session.get(self.endpoint, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            LOG.warning("Tahmin isteği başarısız: %s", e)
            raise TransportError(f"{FETCH_FAILED_MSG}: no se pudo conectar con el servicio") from e

        if not 200 <= r.status_code < 300:
            LOG.warning("Tahmin servisi HTTP %s döndü", r.status_code)
            raise ResponseError(f"{FETCH_FAILED_MSG} (HTTP {r.status_code})", status_code=r.status_code)

        try:
            payload = r.json()
        except ValueError as e:
            raise ParseError("Respuesta inválida: el cuerpo no es JSON") from e

        records = parse_predictions(payload)
        LOG.info("  ✓ %d tahmin alındı", len(records))
        return records
