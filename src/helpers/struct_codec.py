"""
Binary record codec.

A RecordLayout lists the fields of a record in wire order, each with a
struct format character. Records are packed with an explicit byte order and
no padding, so the byte layout does not depend on the platform:

    field order  : as listed in the layout
    byte widths  : b/B=1, h/H=2, i/I=4, q/Q=8, f=4, d=8, ?=1, Ns=N bytes
    endianness   : little-endian unless the layout says otherwise
"""

import struct
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from markup_engine.errors import NullArgument, RecordEncodingError


BYTE_ORDERS = {'little': '<', 'big': '>'}


@dataclass(frozen=True)
class RecordLayout:
    """Ordered (name, format) fields of a binary record."""
    fields: Tuple[Tuple[str, str], ...]
    byte_order: str = 'little'

    def __post_init__(self):
        if self.byte_order not in BYTE_ORDERS:
            raise RecordEncodingError(f"Unknown byte order '{self.byte_order}'")
        try:
            struct.calcsize(self.format)
        except struct.error as e:
            raise RecordEncodingError(f"Invalid record layout: {e}") from e

    @property
    def format(self) -> str:
        return BYTE_ORDERS[self.byte_order] + ''.join(fmt for _, fmt in self.fields)

    @property
    def size(self) -> int:
        """Number of bytes in a packed record."""
        return struct.calcsize(self.format)

    def field_names(self):
        return [name for name, _ in self.fields]


def pack_record(record: Any, layout: RecordLayout) -> bytes:
    """
    Pack a record into bytes.

    Args:
        record: Mapping or object holding every field named in the layout
        layout: Field order and formats

    Returns:
        layout.size bytes

    Raises:
        NullArgument: if record is None or a field is missing
        RecordEncodingError: if a value does not fit its field format
    """
    if record is None:
        raise NullArgument('record')

    values = []
    for name in layout.field_names():
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value is None:
            raise NullArgument(name)
        if isinstance(value, str):
            value = value.encode('utf-8')
        values.append(value)

    try:
        return struct.pack(layout.format, *values)
    except struct.error as e:
        raise RecordEncodingError(f"Cannot pack record: {e}") from e


def unpack_record(data: bytes, layout: RecordLayout) -> Dict[str, Any]:
    """Unpack bytes produced by pack_record into a dict of field values."""
    if data is None:
        raise NullArgument('data')
    if len(data) != layout.size:
        raise RecordEncodingError(f"Expected {layout.size} bytes, got {len(data)}")

    values = struct.unpack(layout.format, data)
    return dict(zip(layout.field_names(), values))
