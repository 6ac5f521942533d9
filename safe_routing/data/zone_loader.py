"""
Safety zone loading and snapshot management.

Zones are read from a store into an immutable snapshot. Each planning request
works against the snapshot it was handed; a refresh builds a new snapshot and
swaps the reference, so in-flight requests never observe a partial table.
"""

import json
import logging
import os
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from ..providers.base import SafetyZoneStore
from .models import CrimeRecord, CrimeType, SafetyZone

logger = logging.getLogger(__name__)

DEFAULT_ZONES_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'safety_zones.json')


class ZoneSnapshot(NamedTuple):
    """Immutable view of the zone table at one point in time."""
    zones: Tuple[SafetyZone, ...]
    crime_records: Tuple[CrimeRecord, ...]
    loaded_at: datetime

    @property
    def is_empty(self) -> bool:
        return not self.zones


def load_safety_zones(data_path: Optional[str] = None) -> Tuple[List[SafetyZone], List[CrimeRecord]]:
    """
    Load safety zones and crime type counts from a JSON file.

    The file holds a ``safety_zones`` list of zone rows and an optional
    ``crime_type_counts`` list of ``{area, crime_type, count}`` rows.

    Args:
        data_path: Path to the JSON file, defaults to the bundled table

    Returns:
        Tuple of (zones, crime records)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or has the wrong shape
    """
    if data_path is None:
        data_path = DEFAULT_ZONES_PATH

    if not os.path.exists(data_path):
        raise FileNotFoundError(f"Safety zone file not found: {data_path}")

    logger.info(f"Loading safety zones from: {data_path}")

    try:
        with open(data_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format in safety zone file: {e}")

    if isinstance(raw, list):
        raw = {'safety_zones': raw}
    if not isinstance(raw, dict) or 'safety_zones' not in raw:
        raise ValueError("Safety zone file must contain a 'safety_zones' list")

    zones = _parse_zones(raw['safety_zones'])
    records = _parse_crime_records(raw.get('crime_type_counts', []))

    logger.info(f"Loaded {len(zones)} safety zones and {len(records)} crime type counts")
    return zones, records


def _parse_zones(rows: Iterable[Dict[str, Any]]) -> List[SafetyZone]:
    zones = []
    for row in rows:
        try:
            zone = SafetyZone.from_record(row)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Skipping invalid safety zone row {row!r}: {e}")
            continue
        if not zone.area:
            logger.warning(f"Skipping safety zone without an area name: {row!r}")
            continue
        zones.append(zone)
    return zones


def _parse_crime_records(rows: Iterable[Dict[str, Any]]) -> List[CrimeRecord]:
    records = []
    for row in rows:
        try:
            records.append(CrimeRecord(
                area=str(row['area']).strip(),
                crime_type=CrimeType(str(row['crime_type']).strip().lower()),
                count=int(row.get('count', 0)),
            ))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping invalid crime type row {row!r}: {e}")
    return records


class JsonZoneStore(SafetyZoneStore):
    """Zone store backed by a JSON file on disk."""

    def __init__(self, data_path: Optional[str] = None):
        self.data_path = data_path or DEFAULT_ZONES_PATH

    def load_zones(self) -> List[SafetyZone]:
        zones, _ = load_safety_zones(self.data_path)
        return zones

    def load_crime_records(self) -> List[CrimeRecord]:
        _, records = load_safety_zones(self.data_path)
        return records

    def load_table(self) -> Tuple[List[SafetyZone], List[CrimeRecord]]:
        return load_safety_zones(self.data_path)


class InMemoryZoneStore(SafetyZoneStore):
    """Zone store holding a fixed list, used by tests and embedding callers."""

    def __init__(self, zones: Iterable[SafetyZone] = (),
                 crime_records: Iterable[CrimeRecord] = ()):
        self._zones = tuple(zones)
        self._crime_records = tuple(crime_records)

    def load_zones(self) -> List[SafetyZone]:
        return list(self._zones)

    def load_crime_records(self) -> List[CrimeRecord]:
        return list(self._crime_records)


class ZoneSnapshotHolder:
    """
    Holds the current zone snapshot and replaces it atomically on refresh.

    Readers call ``current()`` once per request and keep using that snapshot.
    A failed refresh keeps the previous snapshot in place.
    """

    def __init__(self, store: SafetyZoneStore):
        self.store = store
        self._lock = threading.Lock()
        self._snapshot: Optional[ZoneSnapshot] = None

    def current(self) -> ZoneSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            snapshot = self.refresh()
        return snapshot

    def refresh(self) -> ZoneSnapshot:
        """Reload the store and swap in the new snapshot."""
        with self._lock:
            try:
                zones, records = self.store.load_table()
                zones, records = tuple(zones), tuple(records)
            except (OSError, ValueError) as e:
                if self._snapshot is not None:
                    logger.error(f"Zone refresh failed, keeping previous snapshot: {e}")
                    return self._snapshot
                logger.error(f"Zone load failed, starting with an empty table: {e}")
                zones, records = (), ()

            snapshot = ZoneSnapshot(zones, records, datetime.now(timezone.utc))
            self._snapshot = snapshot

        if snapshot.is_empty:
            logger.warning("Zone snapshot is empty - every point will score neutral")
        else:
            logger.info(f"Zone snapshot refreshed with {len(snapshot.zones)} zones")
        return snapshot
