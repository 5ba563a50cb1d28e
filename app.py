from __future__ import annotations
import logging
import os, sys

import streamlit as st

# ── local path
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from config.settings import load_settings

SETTINGS = load_settings()
st.set_page_config(page_title=SETTINGS.app_name, layout="wide")  # ← ilk Streamlit çağrısı

import folium
from streamlit_folium import st_folium

# ── local modules
from components.query_form import render_query_form
from dataio.loaders import PredictionClient
from services.orchestrator import DashboardState, PredictionController, QueryParameters
from utils.deck import build_prediction_deck
from utils.tz import default_query_inputs
from utils.ui import (
    SMALL_UI_CSS,
    MapRenderer,
    build_marker_specs,
    build_prediction_map,
    header_with_help,
    render_empty_state,
    render_prediction_list,
)

# ────────────────────────────── Logging ayarı ──────────────────────────────────
LOG = logging.getLogger("crime_dashboard")
logging.basicConfig(
    level=getattr(logging, SETTINGS.log_level, logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
)

RENDERERS: dict[str, MapRenderer] = {
    "Folium": build_prediction_map,
    "pydeck": build_prediction_deck,
}

# ───────────────────────────────── helpers ─────────────────────────────────
def _new_controller() -> PredictionController:
    d, t = default_query_inputs()
    client = PredictionClient(SETTINGS.api_url, timeout=SETTINGS.timeout_s)
    LOG.info("Yeni oturum; tahmin servisi: %s", client.endpoint)
    return PredictionController(client.fetch, DashboardState(query=QueryParameters(date=d, time=t)))

def get_controller() -> PredictionController:
    if "controller" not in st.session_state:
        st.session_state["controller"] = _new_controller()
    return st.session_state["controller"]

# ─────────────────────────── UI ───────────────────────────
st.markdown(SMALL_UI_CSS, unsafe_allow_html=True)
st.title(f"⚠️ {SETTINGS.app_name}", anchor=False)
st.caption("Sistema de predicción de crímenes basado en análisis temporal y espacial")

controller = get_controller()
st.session_state.setdefault("pending_submit", False)

with st.sidebar:
    form = render_query_form(controller, pending=st.session_state["pending_submit"])

# Tıklama → bir sonraki çalıştırmada buton 'Prediciendo...' ve pasif görünür, istek o sırada yapılır.
if form.submitted:
    st.session_state["pending_submit"] = True
    st.rerun()

# ── main (istek sürerken önceki sonuçlar ekranda kalır)
if controller.has_results:
    records = controller.records
    markers = build_marker_specs(records)

    header_with_help("📍 Mapa de Predicciones", "Color según probabilidad; clic en un punto para detalles")
    render_map = RENDERERS.get(form.engine, build_prediction_map)
    fig = render_map(markers, controller.map_center, controller.state.zoom)
    if isinstance(fig, folium.Map):
        st_folium(fig, key="prediction_map", height=420, use_container_width=True, returned_objects=[])
    else:
        st.pydeck_chart(fig)

    render_prediction_list(records)
elif not (controller.busy or st.session_state["pending_submit"]):
    render_empty_state()

if st.session_state["pending_submit"]:
    with st.spinner("Prediciendo..."):
        try:
            controller.submit()
        finally:
            st.session_state["pending_submit"] = False
    st.rerun()
