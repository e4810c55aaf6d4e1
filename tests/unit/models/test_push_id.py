"""Unit tests for the PushId model."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from firestack.utils.core import InvalidPushIdError, ManualClock
from firestack.utils.ids import PushIdGenerator
from firestack.utils.models import PushId, is_push_id


class TestPushId:
    """Test PushId parsing and derived fields."""

    def test_parse_generated_id(self):
        """Test that a generated id exposes the timestamp it was built from."""
        generator = PushIdGenerator(clock=ManualClock(1_700_000_000_123))
        push_id = PushId.parse(generator.generate())

        assert push_id.timestamp_ms == 1_700_000_000_123
        assert push_id.timestamp == datetime(2023, 11, 14, 22, 13, 20, 123000, tzinfo=UTC)
        assert len(push_id.suffix) == 12
        assert push_id.suffix_digits == generator.state.last_random_digits

    def test_known_value(self):
        """Test decoding a fixed identifier."""
        push_id = PushId.parse("------Ec" + "----------0-")

        assert push_id.timestamp_ms == 1000
        assert push_id.suffix_digits == [0] * 10 + [1, 0]
        assert str(push_id) == "------Ec----------0-"

    def test_max_timestamp_beyond_datetime_range(self):
        """Test that an id past year 9999 parses but its datetime raises a library error."""
        push_id = PushId.parse("z" * 20)

        assert push_id.timestamp_ms == 2**48 - 1
        with pytest.raises(InvalidPushIdError):
            push_id.timestamp

    @pytest.mark.parametrize(
        "value",
        ["-KXMr7k2tXUFQqiaZRY4", "z" * 20, "-KXMr7k2tXUFQqiaZRY", "-KXMr7k2tXUFQqiaZRY+", ""],
    )
    def test_parse_agrees_with_is_push_id(self, value):
        """Test that the model and the predicate accept the same strings."""
        try:
            PushId.parse(value)
            parsed = True
        except InvalidPushIdError:
            parsed = False

        assert parsed is is_push_id(value)

    def test_parse_rejects_wrong_length(self):
        """Test that short values raise InvalidPushIdError."""
        with pytest.raises(InvalidPushIdError):
            PushId.parse("-KXMr7k2tXUFQqiaZRY")

    def test_parse_rejects_foreign_characters(self):
        """Test that characters outside the alphabet are rejected."""
        with pytest.raises(InvalidPushIdError):
            PushId.parse("-KXMr7k2tXUFQqiaZRY+")

    def test_constructor_raises_pydantic_error(self):
        """Test direct construction validates through pydantic."""
        with pytest.raises(PydanticValidationError):
            PushId(value="short")

    def test_frozen(self):
        """Test that PushId is immutable."""
        push_id = PushId.parse("-KXMr7k2tXUFQqiaZRY4")
        with pytest.raises(PydanticValidationError):
            push_id.value = "-KXMr7k2tXUFQqiaZRY5"

    def test_ordering_follows_generation(self):
        """Test that PushId instances sort in generation order."""
        clock = ManualClock(1000)
        generator = PushIdGenerator(clock=clock)
        ids = []
        for _ in range(5):
            ids.append(PushId.parse(generator.generate()))
            ids.append(PushId.parse(generator.generate()))
            clock.advance(3)

        assert sorted(reversed(ids)) == ids
        assert ids[0] < ids[1] <= ids[2]


class TestIsPushId:
    """Test the is_push_id predicate."""

    def test_valid(self):
        assert is_push_id("-KXMr7k2tXUFQqiaZRY4")

    def test_invalid(self):
        assert not is_push_id("-KXMr7k2tXUFQqiaZRY")
        assert not is_push_id("-KXMr7k2tXUFQqiaZRY!")
        assert not is_push_id(None)
