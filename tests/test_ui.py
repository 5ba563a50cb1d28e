import folium
from folium.plugins import MarkerCluster

from utils.constants import GREEN, RED
from utils.ui import MarkerSpec, build_marker_specs, build_prediction_map, popup_html, sort_records
from tests.fakes import make_record


def test_marker_specs_follow_records():
    recs = [make_record(lat=10, lon=30, probability=0.7), make_record(lat=20, lon=40, probability=0.01)]
    specs = build_marker_specs(recs)
    assert [s.position for s in specs] == [(10, 30), (20, 40)]
    assert [s.color for s in specs] == [RED, GREEN]
    assert "Simple Assault" in specs[0].popup_html


def test_popup_content():
    rec = make_record(lat=39.739215, lon=-104.990251, probability=0.2346, class_id=99, crime_type="odd <type>")
    out = popup_html(rec)
    assert "odd &lt;type&gt;" in out
    assert "23.46%" in out
    assert "Medio" in out
    assert "39.7392, -104.9903" in out
    assert "Cluster:</b> 4" in out


def test_prediction_map_has_one_clustered_marker_per_record():
    specs = build_marker_specs([make_record(probability=0.9), make_record(probability=0.01)])
    m = build_prediction_map(specs, center=(15.0, 35.0), zoom=12)

    assert isinstance(m, folium.Map)
    assert m.location == [15.0, 35.0]
    clusters = [c for c in m._children.values() if isinstance(c, MarkerCluster)]
    assert len(clusters) == 1
    markers = [c for c in clusters[0]._children.values() if isinstance(c, folium.CircleMarker)]
    assert len(markers) == 2

    rendered = m.get_root().render()
    assert RED in rendered and GREEN in rendered
    assert "openstreetmap" in rendered


def test_prediction_map_without_markers():
    m = build_prediction_map([], center=(1.0, 2.0))
    assert m.location == [1.0, 2.0]


def test_marker_spec_is_plain_data():
    spec = MarkerSpec(position=(1.0, 2.0), color=RED, popup_html="<b>x</b>")
    assert spec.tooltip == ""


def test_sort_records():
    a = make_record(probability=0.3, spatial_cluster=9, class_id=30)   # Robbery
    b = make_record(probability=0.9, spatial_cluster=1, class_id=29)   # Arson
    c = make_record(probability=0.1, spatial_cluster=5, class_id=13)   # Murder
    recs = [a, b, c]

    assert sort_records(recs) == [a, b, c]
    assert sort_records(recs, "prob_desc") == [b, a, c]
    assert sort_records(recs, "prob_asc") == [c, a, b]
    assert sort_records(recs, "cluster") == [b, c, a]
    assert sort_records(recs, "title") == [b, c, a]
    assert sort_records(recs, "whatever") == [a, b, c]
    assert recs == [a, b, c]
