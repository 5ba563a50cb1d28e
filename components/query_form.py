# components/query_form.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

import streamlit as st

from services.orchestrator import PredictionController
from utils.constants import TOP_N_OPTIONS
from utils.ui import render_legend

MAP_ENGINES: List[str] = ["Folium", "pydeck"]


@dataclass(frozen=True)
class FormResult:
    submitted: bool
    engine: str


def render_query_form(controller: PredictionController, *, pending: bool = False) -> FormResult:
    """
    Kenar çubuğu: tarih, saat, Top-N, harita motoru, 'Predecir' butonu,
    hata kutusu ve (sonuç varsa) risk lejantı.

    Girdiler her çalıştırmada controller'a yazılır; buton istek uçuştayken
    (pending ya da controller.busy) devre dışıdır.
    """
    q = controller.query
    busy = pending or controller.busy

    st.subheader("🔎 Parámetros de Predicción", anchor=False)

    picked_date = st.date_input("📅 Fecha", value=q.date, key="q_date", format="YYYY-MM-DD")
    picked_time = st.time_input("🕒 Hora", value=q.time, key="q_time", step=60)
    top_idx = TOP_N_OPTIONS.index(q.top_n) if q.top_n in TOP_N_OPTIONS else 0
    top_n = st.selectbox("Top N Predicciones", TOP_N_OPTIONS, index=top_idx, key="q_top_n")

    controller.set_date(picked_date or None)
    controller.set_time(picked_time or None)
    controller.set_top_n(int(top_n))

    engine = st.radio("Motor de mapa", MAP_ENGINES, index=0, horizontal=True, key="map_engine")

    label = "⏳ Prediciendo..." if busy else "🔍 Predecir"
    submitted = st.button(label, disabled=busy, type="primary", key="btn_predict")

    if controller.error:
        st.error(controller.error)

    if controller.has_results:
        render_legend()

    return FormResult(submitted=bool(submitted) and not busy, engine=engine)
