# utils/deck.py
from __future__ import annotations
from typing import List, Sequence, Tuple

import pandas as pd
import pydeck as pdk

from utils.ui import MarkerSpec

_DEF_COLOR = [90, 120, 140, 180]

def hex_to_rgba(color: str, alpha: int = 180) -> List[int]:
    """'#dc2626' → [220, 38, 38, alpha]; bozuk girdide varsayılan gri."""
    s = str(color or "").strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        return list(_DEF_COLOR)
    try:
        r, g, b = (int(s[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return list(_DEF_COLOR)
    return [r, g, b, alpha]

def markers_to_frame(markers: Sequence[MarkerSpec]) -> pd.DataFrame:
    cols = ["lat", "lon", "_color", "_line", "popup"]
    if not markers:
        return pd.DataFrame(columns=cols)
    return pd.DataFrame(
        [{
            "lat": float(mk.position[0]),
            "lon": float(mk.position[1]),
            "_color": hex_to_rgba(mk.color, 180),   # fillOpacity ≈ 0.7
            "_line": hex_to_rgba(mk.color, 255),
            "popup": mk.popup_html,
        } for mk in markers],
        columns=cols,
    )

# ───────────────────────────── Ana API ─────────────────────────────
def build_prediction_deck(
    markers: Sequence[MarkerSpec],
    center: Tuple[float, float],
    zoom: int = 12,
    map_style: str = "light",
) -> pdk.Deck:
    view_state = pdk.ViewState(latitude=float(center[0]), longitude=float(center[1]), zoom=zoom)
    data = markers_to_frame(markers)

    layers: list[pdk.Layer] = []
    if not data.empty:
        layers.append(
            pdk.Layer(
                "ScatterplotLayer",
                data=data,
                pickable=True,
                stroked=True,
                filled=True,
                get_position="[lon, lat]",
                get_radius=8,
                radius_units="pixels",
                line_width_min_pixels=2,
                get_fill_color="_color",
                get_line_color="_line",
            )
        )

    tooltip = {
        "html": "{popup}",
        "style": {"backgroundColor": "white", "color": "#111827", "maxWidth": "300px"},
    }
    return pdk.Deck(layers=layers, initial_view_state=view_state, map_style=map_style, tooltip=tooltip)
