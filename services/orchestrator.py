# services/orchestrator.py
"""
Tahmin isteği durum makinesi.

IDLE → VALIDATING → FETCHING → {SUCCESS, FAILED}; SUCCESS/FAILED yeni bir
submit() kabul eder. Tüm panel durumu tek bir DashboardState içinde tutulur ve
yalnızca PredictionController tarafından değiştirilir.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum
from typing import Callable, List, Optional, Tuple

import numpy as np

from dataio.errors import InputError, PredictionError
from dataio.loaders import PredictionRecord
from utils.constants import DEFAULT_CENTER, DEFAULT_TOP_N, DEFAULT_ZOOM
from utils.tz import compose_datetime_str, is_blank

LOG = logging.getLogger(__name__)

MISSING_INPUT_MSG = "Por favor selecciona fecha y hora"
UNKNOWN_ERROR_MSG = "Error desconocido"

Fetcher = Callable[[str, int], List[PredictionRecord]]


class Phase(str, Enum):
    IDLE       = "idle"
    VALIDATING = "validating"
    FETCHING   = "fetching"
    SUCCESS    = "success"
    FAILED     = "failed"


@dataclass
class QueryParameters:
    date: Optional[date] = None
    time: Optional[time] = None
    top_n: int = DEFAULT_TOP_N

    @property
    def is_complete(self) -> bool:
        return not (is_blank(self.date) or is_blank(self.time))

    def datetime_str(self) -> str:
        return compose_datetime_str(self.date, self.time)


@dataclass
class DashboardState:
    query: QueryParameters = field(default_factory=QueryParameters)
    records: List[PredictionRecord] = field(default_factory=list)
    phase: Phase = Phase.IDLE
    error: str = ""
    map_center: Tuple[float, float] = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM
    generation: int = 0


def mean_center(records: List[PredictionRecord]) -> Optional[Tuple[float, float]]:
    """Ağırlıksız enlem/boylam ortalaması; boş listede None."""
    if not records:
        return None
    lat = float(np.mean([r.latitude for r in records]))
    lon = float(np.mean([r.longitude for r in records]))
    return (lat, lon)


class PredictionController:
    def __init__(self, fetcher: Fetcher, state: Optional[DashboardState] = None):
        self._fetch = fetcher
        self.state = state or DashboardState()

    # ── okuma ──
    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def busy(self) -> bool:
        return self.state.phase == Phase.FETCHING

    @property
    def records(self) -> List[PredictionRecord]:
        return list(self.state.records)

    @property
    def has_results(self) -> bool:
        return bool(self.state.records)

    @property
    def error(self) -> str:
        return self.state.error

    @property
    def map_center(self) -> Tuple[float, float]:
        return self.state.map_center

    @property
    def query(self) -> QueryParameters:
        return self.state.query

    # ── form girdileri ──
    def set_date(self, value: Optional[date]) -> None:
        self.state.query.date = value

    def set_time(self, value: Optional[time]) -> None:
        self.state.query.time = value

    def set_top_n(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"top_n must be a positive integer, got {value!r}")
        self.state.query.top_n = value

    # ── geçişler ──
    def _fail(self, err: PredictionError) -> None:
        self.state.phase = Phase.FAILED
        self.state.error = str(err)
        LOG.warning("→ FAILED: %s", err)

    def submit(self) -> bool:
        """Kullanıcı 'Predecir' dedi. İstek yapıldıysa True; uçuşta istek varsa no-op (False)."""
        if self.busy:
            LOG.info("Zaten istek var; tekrar tetikleme yok sayıldı")
            return False

        self.state.phase = Phase.VALIDATING
        q = self.state.query
        if not q.is_complete:
            self._fail(InputError(MISSING_INPUT_MSG))
            return False

        self.state.phase = Phase.FETCHING
        self.state.error = ""
        self.state.generation += 1
        gen = self.state.generation
        datetime_str = q.datetime_str()
        LOG.info("→ FETCHING datetime=%s top_n=%s (gen=%d)", datetime_str, q.top_n, gen)

        try:
            records = self._fetch(datetime_str, q.top_n)
        except PredictionError as e:
            if gen == self.state.generation:
                self._fail(e)
            return True
        except Exception:
            LOG.exception("Tahmin alınırken beklenmeyen hata")
            if gen == self.state.generation:
                self._fail(PredictionError(UNKNOWN_ERROR_MSG))
            return True

        if gen != self.state.generation:
            LOG.info("Eski yanıt atıldı (gen=%d, güncel=%d)", gen, self.state.generation)
            return True

        self.state.records = list(records)
        center = mean_center(self.state.records)
        if center is not None:
            self.state.map_center = center
        self.state.phase = Phase.SUCCESS
        LOG.info("→ SUCCESS: %d kayıt, merkez=%s", len(self.state.records), self.state.map_center)
        return True
