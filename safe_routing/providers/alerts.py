"""
Emergency alert composition and dispatch.
"""

import logging
from typing import Optional, Sequence

from ..data.models import Point
from .base import AlertDispatcher

logger = logging.getLogger(__name__)

CITY_NAME = 'Visakhapatnam'


def osm_location_url(point: Point) -> str:
    return f"https://www.openstreetmap.org/?mlat={point.lat}&mlon={point.lng}&zoom=17"


def compose_sos_message(point: Point, landmark: Optional[str] = None, note: Optional[str] = None,
                        city: str = CITY_NAME) -> str:
    """
    Build the SOS text sent to emergency contacts.

    Args:
        point: Location of the person raising the alert
        landmark: Nearest known area
        note: Custom message replacing the default text

    Returns:
        Message text with a map link and exact coordinates
    """
    if note:
        return note
    landmark_text = landmark or 'Unknown Location'
    return (f"ALERT: I'm at {landmark_text}, {city}. "
            f"Exact loc: {osm_location_url(point)} ({point.lat:.6f},{point.lng:.6f})")


class LoggingAlertDispatcher(AlertDispatcher):
    """Dispatcher that records alerts in the log instead of sending them."""

    def __init__(self):
        self.sent = []

    async def send(self, phone_numbers: Sequence[str], message: str) -> int:
        delivered = 0
        for number in phone_numbers:
            if not number or not str(number).strip():
                logger.warning("Skipping empty phone number")
                continue
            logger.info(f"SOS to {number}: {message}")
            self.sent.append((number, message))
            delivered += 1
        logger.info(f"SOS alert dispatched to {delivered} out of {len(phone_numbers)} contacts")
        return delivered
