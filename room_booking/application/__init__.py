"""
Прикладной слой: порты и сервис управления бронированиями номеров.
"""

from . import ports
from .services import REFERENCE_KINDS, RoomBookingApplicationService

__all__ = [
    "ports",
    "REFERENCE_KINDS",
    "RoomBookingApplicationService",
]
