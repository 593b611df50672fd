"""
Treasure records and their fixed-width binary layout.

A records file is a plain concatenation of 336-byte records with no header.
Each record is packed little-endian as::

    offset  width  field
         0      4  id         int32
         4     50  username   UTF-8, NUL padded (49 usable bytes)
        54      2  padding
        56      8  latitude   float64
        64      8  longitude  float64
        72    256  clue       UTF-8, NUL padded (255 usable bytes)
       328      4  value      int32
       332      4  padding
"""

from __future__ import annotations

import struct
from collections.abc import Iterator
from typing import Any, BinaryIO

from pydantic import BaseModel, Field, field_validator

from treasurehunt.core.constants import CLUE_WIDTH, INT32_MAX, INT32_MIN, USERNAME_WIDTH

RECORD_FORMAT = f"<i{USERNAME_WIDTH}s2xdd{CLUE_WIDTH}si4x"
RECORD_STRUCT = struct.Struct(RECORD_FORMAT)
RECORD_SIZE = RECORD_STRUCT.size  # 336


def _clip(text: str, width: int) -> str:
    """Cut ``text`` at its first NUL and to ``width - 1`` UTF-8 bytes."""
    text = text.split("\0", 1)[0]
    raw = text.encode("utf-8")
    if len(raw) < width:
        return text
    return raw[: width - 1].decode("utf-8", errors="ignore")


def _pad(text: str, width: int) -> bytes:
    return text.encode("utf-8").ljust(width, b"\0")


def _unpad(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class Treasure(BaseModel):
    """One treasure record. ``id`` is 0 until the store assigns one."""

    id: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)
    username: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    clue: str = ""
    value: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX)

    @field_validator("username", mode="before")
    @classmethod
    def clip_username(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _clip(v.rstrip("\n"), USERNAME_WIDTH)
        return v

    @field_validator("clue", mode="before")
    @classmethod
    def clip_clue(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _clip(v.rstrip("\n"), CLUE_WIDTH)
        return v

    def pack(self) -> bytes:
        return RECORD_STRUCT.pack(
            self.id,
            _pad(self.username, USERNAME_WIDTH),
            self.latitude,
            self.longitude,
            _pad(self.clue, CLUE_WIDTH),
            self.value,
        )

    @classmethod
    def unpack(cls, data: bytes) -> Treasure:
        tid, username, lat, lon, clue, value = RECORD_STRUCT.unpack(data)
        return cls(
            id=tid,
            username=_unpad(username),
            latitude=lat,
            longitude=lon,
            clue=_unpad(clue),
            value=value,
        )

    def summary(self) -> dict[str, Any]:
        return {"id": self.id, "username": self.username, "value": self.value}


def iter_records(fh: BinaryIO) -> Iterator[bytes]:
    """Yield each complete raw record; a trailing partial record is ignored."""
    while True:
        chunk = fh.read(RECORD_SIZE)
        if len(chunk) < RECORD_SIZE:
            return
        yield chunk


def read_id(raw: bytes) -> int:
    """Return the id of a raw record without decoding the rest of it."""
    return struct.unpack_from("<i", raw, 0)[0]
