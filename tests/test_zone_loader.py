"""
Safety zone loading and snapshot tests.
"""

import json
from unittest.mock import Mock

import pytest

from safe_routing.data import (
    CrimeType,
    InMemoryZoneStore,
    JsonZoneStore,
    SafetyZone,
    Severity,
    ZoneSnapshotHolder,
    load_safety_zones,
)


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding='utf-8')
    return str(path)


class TestLoadSafetyZones:

    def test_bundled_table(self):
        zones, records = load_safety_zones()
        areas = {zone.area for zone in zones}
        assert "Gajuwaka" in areas
        assert all(0 <= zone.safety_score <= 100 for zone in zones)
        assert records

    def test_list_payload(self, tmp_path):
        path = write_json(tmp_path / "zones.json", [
            {"area": "Gajuwaka", "safety_score": 28, "crime_count": 14, "severity": "critical"},
            {"areaName": "MVP Colony", "safetyScore": 82, "crimeCount": 2},
        ])
        zones, records = load_safety_zones(path)
        assert zones[0] == SafetyZone("Gajuwaka", 28, 14, Severity.HIGH)
        assert zones[1].area == "MVP Colony"
        assert zones[1].safety_score == 82
        assert records == []

    def test_crime_type_counts(self, tmp_path):
        path = write_json(tmp_path / "zones.json", {
            "safety_zones": [{"area": "Gajuwaka", "safety_score": 28}],
            "crime_type_counts": [
                {"area": "Gajuwaka", "crime_type": "Robbery", "count": 5},
                {"area": "Gajuwaka", "crime_type": "arson", "count": 1},
            ],
        })
        _, records = load_safety_zones(path)
        assert len(records) == 1
        assert records[0].crime_type is CrimeType.ROBBERY

    def test_invalid_rows_are_skipped(self, tmp_path):
        path = write_json(tmp_path / "zones.json", [
            {"area": "Gajuwaka", "safety_score": 150},
            {"area": "", "safety_score": 50},
            {"area": "Siripuram", "safety_score": "n/a"},
            "not a row",
            {"area": "Dwaraka Nagar", "safety_score": 45, "crime_count": 8},
        ])
        zones, _ = load_safety_zones(path)
        assert [zone.area for zone in zones] == ["Dwaraka Nagar"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_safety_zones(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "zones.json"
        path.write_text("{not json", encoding='utf-8')
        with pytest.raises(ValueError):
            load_safety_zones(str(path))

    def test_wrong_shape(self, tmp_path):
        with pytest.raises(ValueError):
            load_safety_zones(write_json(tmp_path / "zones.json", {"zones": []}))


class TestZoneSnapshotHolder:

    def test_lazy_load(self):
        store = Mock(wraps=InMemoryZoneStore([SafetyZone("Gajuwaka", 28, 3)]))
        holder = ZoneSnapshotHolder(store)
        store.load_table.assert_not_called()

        snapshot = holder.current()
        assert len(snapshot.zones) == 1
        assert holder.current() is snapshot
        store.load_table.assert_called_once()

    def test_refresh_swaps_snapshot(self, tmp_path):
        path = tmp_path / "zones.json"
        write_json(path, [{"area": "Gajuwaka", "safety_score": 28}])
        holder = ZoneSnapshotHolder(JsonZoneStore(str(path)))
        before = holder.current()

        write_json(path, [{"area": "Gajuwaka", "safety_score": 28},
                          {"area": "Siripuram", "safety_score": 80}])
        after = holder.refresh()

        assert len(before.zones) == 1
        assert len(after.zones) == 2
        assert holder.current() is after

    def test_failed_refresh_keeps_previous(self):
        store = Mock()
        store.load_table.return_value = ([SafetyZone("Gajuwaka", 28, 3)], [])
        holder = ZoneSnapshotHolder(store)
        first = holder.current()

        store.load_table.side_effect = OSError("disk gone")
        assert holder.refresh() is first
        assert holder.current() is first

    def test_failed_first_load_is_empty(self, tmp_path):
        holder = ZoneSnapshotHolder(JsonZoneStore(str(tmp_path / "missing.json")))
        snapshot = holder.current()
        assert snapshot.is_empty
        assert snapshot.crime_records == ()

    def test_refresh_reads_the_file_once(self, tmp_path, monkeypatch):
        from safe_routing.data import zone_loader

        path = write_json(tmp_path / "zones.json", {
            "safety_zones": [{"area": "Gajuwaka", "safety_score": 28, "crime_count": 3}],
            "crime_type_counts": [{"area": "Gajuwaka", "crime_type": "robbery", "count": 4}],
        })
        loader = Mock(wraps=zone_loader.load_safety_zones)
        monkeypatch.setattr(zone_loader, "load_safety_zones", loader)

        snapshot = ZoneSnapshotHolder(JsonZoneStore(path)).refresh()

        assert loader.call_count == 1
        assert len(snapshot.zones) == 1
        assert snapshot.crime_records[0].crime_type is CrimeType.ROBBERY

    def test_default_table_combines_both_loaders(self):
        store = InMemoryZoneStore([SafetyZone("Gajuwaka", 28, 3)])
        zones, records = store.load_table()
        assert [z.area for z in zones] == ["Gajuwaka"]
        assert records == []
