"""Unit tests for treasurehunt.core.records — Treasure model and binary layout."""

from __future__ import annotations

import io
import struct

import pytest
from pydantic import ValidationError

from treasurehunt.core.records import RECORD_SIZE, Treasure, iter_records, read_id


def _alice() -> Treasure:
    return Treasure(
        id=1, username="alice", latitude=10.5, longitude=20.25, clue="dig here", value=100
    )


class TestLayout:
    def test_record_size(self) -> None:
        assert RECORD_SIZE == 336

    def test_field_offsets(self) -> None:
        raw = _alice().pack()
        assert len(raw) == RECORD_SIZE
        assert struct.unpack_from("<i", raw, 0)[0] == 1
        assert raw[4:9] == b"alice"
        assert raw[9:56] == b"\0" * 47
        assert struct.unpack_from("<dd", raw, 56) == (10.5, 20.25)
        assert raw[72:80] == b"dig here"
        assert struct.unpack_from("<i", raw, 328)[0] == 100
        assert raw[332:] == b"\0\0\0\0"

    def test_read_id_without_decoding(self) -> None:
        raw = Treasure(id=42).pack()
        assert read_id(raw) == 42

    def test_unpack_restores_all_fields(self) -> None:
        original = Treasure(
            id=7,
            username="bob",
            latitude=-33.868820123456789,
            longitude=151.209296,
            clue="under the bridge",
            value=-5,
        )
        assert Treasure.unpack(original.pack()) == original


class TestTextFields:
    def test_username_truncated_to_49_bytes(self) -> None:
        t = Treasure(username="x" * 80)
        assert t.username == "x" * 49
        assert Treasure.unpack(Treasure(username="x" * 80).pack()).username == "x" * 49

    def test_clue_truncated_to_255_bytes(self) -> None:
        assert Treasure(clue="c" * 300).clue == "c" * 255

    def test_truncation_keeps_whole_characters(self) -> None:
        # 25 two-byte characters = 50 bytes; only 24 fit
        t = Treasure(username="é" * 25)
        assert t.username == "é" * 24

    def test_trailing_newline_stripped(self) -> None:
        assert Treasure(username="alice\n").username == "alice"

    def test_text_cut_at_nul(self) -> None:
        assert Treasure(clue="visible\0hidden").clue == "visible"

    def test_invalid_utf8_replaced_on_decode(self) -> None:
        raw = bytearray(Treasure(id=3).pack())
        raw[4:6] = b"\xff\xfe"
        assert Treasure.unpack(bytes(raw)).username == "\ufffd\ufffd"


class TestValidation:
    def test_value_must_fit_int32(self) -> None:
        with pytest.raises(ValidationError):
            Treasure(value=2**31)

    def test_negative_value_allowed(self) -> None:
        assert Treasure(value=-(2**31)).value == -(2**31)


class TestIterRecords:
    def test_ignores_trailing_partial_record(self) -> None:
        data = Treasure(id=1).pack() + Treasure(id=2).pack() + b"\x01" * 100
        ids = [read_id(raw) for raw in iter_records(io.BytesIO(data))]
        assert ids == [1, 2]

    def test_empty_stream(self) -> None:
        assert list(iter_records(io.BytesIO(b""))) == []
