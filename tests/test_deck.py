import pydeck as pdk

from utils.deck import build_prediction_deck, hex_to_rgba, markers_to_frame
from utils.ui import build_marker_specs
from tests.fakes import make_record


def test_hex_to_rgba():
    assert hex_to_rgba("#dc2626") == [220, 38, 38, 180]
    assert hex_to_rgba("#fff", 255) == [255, 255, 255, 255]
    assert hex_to_rgba("nope") == [90, 120, 140, 180]


def test_markers_to_frame():
    specs = build_marker_specs([make_record(lat=10, lon=30, probability=0.6)])
    df = markers_to_frame(specs)
    assert list(df["lat"]) == [10.0]
    assert list(df["lon"]) == [30.0]
    assert df["_color"].iloc[0] == [220, 38, 38, 180]


def test_deck_centers_view_and_adds_scatter_layer():
    specs = build_marker_specs([make_record(lat=10, lon=30), make_record(lat=20, lon=40)])
    deck = build_prediction_deck(specs, center=(15.0, 35.0), zoom=12)
    assert isinstance(deck, pdk.Deck)
    assert deck.initial_view_state.latitude == 15.0
    assert deck.initial_view_state.longitude == 35.0
    assert len(deck.layers) == 1


def test_deck_without_markers_has_no_layers():
    deck = build_prediction_deck([], center=(39.7392, -104.9903))
    assert deck.layers == []
