"""Unit tests for Frame and FrameField."""

import json

import pytest
from pydantic import ValidationError

from dbxquery.core import EPOCH, FieldType
from dbxquery.models import Frame, FrameField

SCHEMA = (
    ("When", FieldType.TIME),
    ("Name", FieldType.STRING),
    ("Count", FieldType.INT64),
)


class TestFrame:
    """Test Frame construction and accessors."""

    def test_from_rows_builds_columns(self):
        frame = Frame.from_rows("demo", SCHEMA, [(EPOCH, "a", 1), (EPOCH, "b", 2)])

        assert frame.name == "demo"
        assert frame.field_names == ["When", "Name", "Count"]
        assert frame.row_count == 2
        assert frame.field("Name").values == ("a", "b")
        assert frame.field("Count").type is FieldType.INT64
        assert frame.rows() == [(EPOCH, "a", 1), (EPOCH, "b", 2)]

    def test_none_becomes_zero_value(self):
        frame = Frame.from_rows("demo", SCHEMA, [(None, None, None)])

        assert frame.rows() == [(EPOCH, "", 0)]

    def test_empty_rows_keep_schema(self):
        """Test zero rows still yield every column."""
        frame = Frame.from_rows("demo", SCHEMA, [])

        assert frame.row_count == 0
        assert frame.field_names == ["When", "Name", "Count"]

    def test_row_width_mismatch(self):
        with pytest.raises(ValueError, match="row 1 has 2 values, expected 3"):
            Frame.from_rows("demo", SCHEMA, [(EPOCH, "a", 1), (EPOCH, "b")])

    def test_unequal_field_lengths_rejected(self):
        with pytest.raises(ValidationError, match="differing lengths"):
            Frame(
                name="bad",
                fields=(
                    FrameField(name="a", type=FieldType.STRING, values=("x",)),
                    FrameField(name="b", type=FieldType.STRING, values=()),
                ),
            )

    def test_unknown_field(self):
        frame = Frame.from_rows("demo", SCHEMA, [])

        with pytest.raises(KeyError):
            frame.field("Missing")

    def test_to_json(self):
        """Test serialization is stable and carries types and values."""
        frame = Frame.from_rows("demo", SCHEMA, [(EPOCH, "a", 1)])

        encoded = frame.to_json()

        assert encoded == frame.to_json()
        decoded = json.loads(encoded)
        assert decoded["name"] == "demo"
        assert decoded["fields"][0]["type"] == "time"
        assert decoded["fields"][0]["values"] == ["1970-01-01T00:00:00Z"]
        assert decoded["fields"][2]["values"] == [1]

    def test_frame_is_frozen(self):
        frame = Frame.from_rows("demo", SCHEMA, [])

        with pytest.raises(ValidationError):
            frame.name = "other"
