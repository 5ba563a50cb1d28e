import pytest


@pytest.fixture
def raw_payload():
    return [
        {
            "date": "2024-05-01T14:00:00",
            "spatial_cluster": 12,
            "latitude": 39.7392,
            "longitude": -104.9903,
            "class_id": 30,
            "crime_type": "robbery",
            "probability": 0.62,
        },
        {
            "date": "2024-05-01T14:00:00",
            "spatial_cluster": 7,
            "latitude": 39.75,
            "longitude": -105.0,
            "class_id": 99,
            "crime_type": "unknown-thing",
            "probability": 0.031,
        },
    ]
