"""
Внешние отображения бронирования номера: схема API и документ хранилища.
"""

from .api import ENUM_TYPES, EnumTypeInfo, RoomBookingInput, RoomBookingType, enum_values
from .persistence import COLLECTION, RoomBookingDocument, from_document, to_document

__all__ = [
    "ENUM_TYPES",
    "EnumTypeInfo",
    "enum_values",
    "RoomBookingType",
    "RoomBookingInput",
    "COLLECTION",
    "RoomBookingDocument",
    "to_document",
    "from_document",
]
