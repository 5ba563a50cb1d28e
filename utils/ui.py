# utils/ui.py
from __future__ import annotations
import html
from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple

import folium
from folium.plugins import MarkerCluster
import streamlit as st

from dataio.loaders import PredictionRecord, predictions_to_frame
from utils.constants import OSM_ATTR, OSM_TILES
from utils.risk import RiskLevel, badge_style, format_probability, legend_items
from utils.tz import fmt_local

__all__ = [
    "SMALL_UI_CSS",
    "MarkerSpec",
    "MapRenderer",
    "SORT_OPTIONS",
    "build_marker_specs",
    "popup_html",
    "build_prediction_map",
    "sort_records",
    "render_legend",
    "render_prediction_list",
    "render_empty_state",
    "title_with_help",
    "header_with_help",
]

# ────────────────────────────── TİPOGRAFİ + LEAFLET DÜZELTMESİ ──────────────────────────────
SMALL_UI_CSS = """
<style>
html, body, [class*="css"] { font-size: 13px; line-height: 1.3; }
h1 { font-size: 1.9rem; line-height: 1.2; margin: .45rem 0 .35rem 0; }
h2 { font-size: 1.0rem;  margin: .25rem 0; }
h3 { font-size: .90rem;  margin: .18rem 0; }

section.main > div.block-container { padding-top: .55rem; padding-bottom: .10rem; }
[data-testid="stSidebar"] .block-container { padding-top: .25rem; padding-bottom: .25rem; }

.stButton > button { font-size: .85rem; padding: 4px 10px; border-radius: 8px; width: 100%; }

/* === Lejant === */
.legend{display:flex;flex-direction:column;gap:4px;padding:.5rem .6rem;background:#f9fafb;border-radius:.4rem}
.legend-row{display:flex;align-items:center;gap:8px;font-size:.82rem}
.legend-dot{width:14px;height:14px;border-radius:50%;display:inline-block}

/* === Tahmin listesi === */
.pred-row{display:flex;justify-content:space-between;align-items:flex-start;
          padding:.6rem .2rem;border-bottom:1px solid #e5e7eb}
.pred-title{font-weight:600;color:#111827;margin-bottom:2px}
.pred-meta{font-size:.80rem;color:#4b5563;line-height:1.45}
.pred-prob{font-size:1.05rem;font-weight:700;color:#111827;text-align:right}
.risk-badge{display:inline-block;font-size:.75rem;padding:2px 8px;border-radius:4px;margin-top:2px}

.title-help{display:inline-flex;align-items:center;gap:6px}
.title-help .hint{
  display:inline-block;width:14px;height:14px;border-radius:50%;
  background:#e5e7eb;color:#111;text-align:center;line-height:14px;
  font-size:10px;font-weight:700;cursor:help;
}

.leaflet-control-container{display:block!important}
.leaflet-control-attribution{display:block!important;opacity:.95}
</style>
"""

# ───────────────────────────── Başlık + mini açıklama ─────────────────────────────
def title_with_help(level: int, text: str, help_text: str | None = None):
    """level=1/2/3 → h1/h2/h3. Hover'da küçük açıklama için title attr."""
    tag = f"h{max(1, min(level, 3))}"
    text = html.escape(text)
    if help_text:
        tip = html.escape(help_text, quote=True)
        inner = f'<span class="text" title="{tip}">{text}</span><span class="hint" title="{tip}">i</span>'
    else:
        inner = f'<span class="text">{text}</span>'
    st.markdown(f'<{tag} class="title-help">{inner}</{tag}>', unsafe_allow_html=True)

def header_with_help(text: str, help_text: str | None = None):
    title_with_help(2, text, help_text)

# ───────────────────────────── Harita sözleşmesi ─────────────────────────────
@dataclass(frozen=True)
class MarkerSpec:
    position: Tuple[float, float]  # (lat, lon)
    color: str
    popup_html: str
    tooltip: str = ""


class MapRenderer(Protocol):
    """Harita motoru: işaretçi listesi + merkez + zoom alır, çizilebilir bir nesne döndürür."""

    def __call__(self, markers: Sequence[MarkerSpec], center: Tuple[float, float], zoom: int): ...


def _badge_html(level: RiskLevel) -> str:
    bg, fg = badge_style(level)
    return f'<span class="risk-badge" style="background:{bg};color:{fg}">{html.escape(level.value)}</span>'


def popup_html(rec: PredictionRecord) -> str:
    bg, fg = badge_style(rec.risk_level)
    return (
        f"<div style='padding:4px;min-width:180px'>"
        f"<h4 style='margin:0 0 6px 0'>{html.escape(rec.title)}</h4>"
        f"<b>Fecha:</b> {fmt_local(rec.date)}<br/>"
        f"<b>Cluster:</b> {rec.spatial_cluster}<br/>"
        f"<b>Probabilidad:</b> {format_probability(rec.probability)}<br/>"
        f"<b>Nivel de Riesgo:</b> "
        f"<span style='background:{bg};color:{fg};padding:1px 6px;border-radius:4px'>"
        f"{html.escape(rec.risk_level.value)}</span><br/>"
        f"<b>Coordenadas:</b> {rec.latitude:.4f}, {rec.longitude:.4f}"
        f"</div>"
    )


def build_marker_specs(records: Sequence[PredictionRecord]) -> List[MarkerSpec]:
    return [
        MarkerSpec(
            position=r.position,
            color=r.color,
            popup_html=popup_html(r),
            tooltip=f"{r.title} • {format_probability(r.probability)}",
        )
        for r in records
    ]

# ───────────────────────────── HARİTA (Folium) ─────────────────────────────
def build_prediction_map(
    markers: Sequence[MarkerSpec],
    center: Tuple[float, float],
    zoom: int = 12,
) -> "folium.Map":
    m = folium.Map(location=list(center), zoom_start=zoom, tiles=None)
    folium.TileLayer(tiles=OSM_TILES, attr=OSM_ATTR, name="OpenStreetMap").add_to(m)

    cluster = MarkerCluster(name="Predicciones").add_to(m)
    for mk in markers:
        folium.CircleMarker(
            location=list(mk.position),
            radius=8,
            color=mk.color,
            fill=True,
            fill_color=mk.color,
            fill_opacity=0.7,
            weight=2,
            popup=folium.Popup(mk.popup_html, max_width=300),
            tooltip=mk.tooltip or None,
        ).add_to(cluster)
    return m

# ───────────────────────────── Sıralama ─────────────────────────────
SORT_OPTIONS = {
    "Orden de respuesta":        "response",
    "Probabilidad (mayor→menor)": "prob_desc",
    "Probabilidad (menor→mayor)": "prob_asc",
    "Cluster espacial":          "cluster",
    "Tipo de crimen":            "title",
}

def sort_records(records: Sequence[PredictionRecord], key: str = "response") -> List[PredictionRecord]:
    """Görüntüleme sırası; kaynak listeyi değiştirmez. Bilinmeyen anahtar → yanıt sırası."""
    out = list(records)
    if key == "prob_desc":
        out.sort(key=lambda r: r.probability, reverse=True)
    elif key == "prob_asc":
        out.sort(key=lambda r: r.probability)
    elif key == "cluster":
        out.sort(key=lambda r: r.spatial_cluster)
    elif key == "title":
        out.sort(key=lambda r: r.title.lower())
    return out

# ───────────────────────────── Lejant / liste / boş durum ─────────────────────────────
def render_legend():
    rows = "".join(
        f'<div class="legend-row"><span class="legend-dot" style="background:{color}"></span>'
        f'<span>{html.escape(label)}</span></div>'
        for color, label in legend_items()
    )
    st.markdown("**Leyenda de Riesgo**")
    st.markdown(f'<div class="legend">{rows}</div>', unsafe_allow_html=True)


def _row_html(rec: PredictionRecord) -> str:
    return (
        '<div class="pred-row"><div>'
        f'<div class="pred-title">{html.escape(rec.title)}</div>'
        '<div class="pred-meta">'
        f"Cluster Espacial: {rec.spatial_cluster}<br/>"
        f"Coordenadas: {rec.latitude:.4f}, {rec.longitude:.4f}<br/>"
        f"Fecha: {fmt_local(rec.date)}"
        "</div></div>"
        f'<div><div class="pred-prob">{format_probability(rec.probability)}</div>'
        f"{_badge_html(rec.risk_level)}</div></div>"
    )


def render_prediction_list(records: Sequence[PredictionRecord], key: str = "pred_sort"):
    header_with_help("Predicciones Detalladas", "Ordenable; la tabla también se ordena por columna")
    label = st.selectbox("Ordenar por", list(SORT_OPTIONS.keys()), index=0, key=key)
    ordered = sort_records(records, SORT_OPTIONS[label])

    tab_list, tab_table = st.tabs(["Lista", "Tabla"])
    with tab_list:
        st.markdown("".join(_row_html(r) for r in ordered), unsafe_allow_html=True)
    with tab_table:
        st.dataframe(predictions_to_frame(ordered), width="stretch", hide_index=True)


def render_empty_state():
    st.info("**No hay predicciones**\n\nSelecciona una fecha y hora para ver las predicciones de crímenes")
