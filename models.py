# models.py
"""
Data model for the tanker loading log.

TankerRecord is the value object operators create and browse. The whole
collection is persisted as one serialized value in the ``stored_values``
key-value table (see record_store.KeyValueStorage).
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Union

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

Number = Union[int, float]


# ============================================================================
# DURABLE KEY-VALUE STORE
# ============================================================================

class StoredValue(Base):
    """One durable entry of the client-side key-value store"""
    __tablename__ = "stored_values"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<StoredValue(key='{self.key}', size={len(self.value or '')})>"


# ============================================================================
# TANKER RECORDS
# ============================================================================

# Python attribute -> wire key, in serialization order
WIRE_KEYS = {
    "serial_number": "serialNumber",
    "tanker_number": "tankerNumber",
    "entry_time": "entryTime",
    "exit_time": "exitTime",
    "bc_number": "bcNumber",
    "ordered_quantity": "orderedQuantity",
    "loaded_quantity": "loadedQuantity",
    "old_index": "oldIndex",
    "current_index": "currentIndex",
    "destination": "destination",
    "id": "id",
    "date": "date",
    "created_by": "createdBy",
    "created_at": "createdAt",
}

# Assigned once by RecordStore.add, never edited
IMMUTABLE_FIELDS = ("id", "date", "created_by", "created_at")

QUANTITY_FIELDS = ("ordered_quantity", "loaded_quantity", "old_index", "current_index")


@dataclass(frozen=True)
class Actor:
    """Authenticated operator, as handed over by the auth collaborator"""
    id: str
    display_name: str = ""


@dataclass(frozen=True)
class RecordInput:
    """Operator-supplied part of a tanker record (already validated)"""
    serial_number: str
    tanker_number: str
    entry_time: str
    exit_time: str
    bc_number: str
    ordered_quantity: Number
    loaded_quantity: Number
    old_index: Number
    current_index: Number
    destination: str


@dataclass(frozen=True)
class TankerRecord:
    """One tanker loading event"""
    serial_number: str
    tanker_number: str
    entry_time: str
    exit_time: str
    bc_number: str
    ordered_quantity: Number
    loaded_quantity: Number
    old_index: Number
    current_index: Number
    destination: str
    id: str
    date: str
    created_by: str
    created_at: str

    @classmethod
    def mutable_fields(cls):
        return tuple(f.name for f in fields(cls) if f.name not in IMMUTABLE_FIELDS)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation (camelCase keys, fixed order)"""
        return {wire: getattr(self, attr) for attr, wire in WIRE_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TankerRecord":
        """Inverse of to_dict; ``exitTime`` may be missing or null"""
        values = {}
        for attr, wire in WIRE_KEYS.items():
            if attr == "exit_time":
                values[attr] = data.get(wire) or ""
                continue
            if wire not in data:
                raise KeyError(f"Record is missing '{wire}'")
            values[attr] = data[wire]
        return cls(**values)


def record_label(record: Optional[TankerRecord]) -> str:
    """Short human label: 'TQ-001 - 2024-01-10 08:15'"""
    if record is None:
        return ""
    return f"{record.tanker_number} - {record.date} {record.entry_time}"
