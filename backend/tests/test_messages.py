"""
Albums API — ExceptionMessage Unit Tests
=========================================

What:  Tests for the ExceptionMessage builder and the 422 payload formatter.

What we test:
    ✅ Builder accepts any subset of fields
    ✅ Built messages are immutable
    ✅ Formatter output for a missing id (all four fields)
    ✅ Fixed message prefix regardless of cause detail
"""

import time

import pytest
from pydantic import ValidationError as PydanticValidationError

from albums_api.exceptions import UnprocessableEntityError
from albums_api.schemas.messages import (
    MESSAGE_PREFIX,
    ExceptionMessage,
    MessageType,
    build_exception_message,
)


class TestExceptionMessageBuilder:
    """Tests for incremental construction."""

    def test_empty_builder_builds_empty_message(self):
        message = ExceptionMessage.builder().build()
        assert message.to_content() == {}

    def test_subset_of_fields(self):
        message = (
            ExceptionMessage.builder()
            .with_type(MessageType.WARNING)
            .with_message("careful")
            .build()
        )
        assert message.to_content() == {"type": "Warning", "message": "careful"}
        assert message.timestamp is None
        assert message.status is None

    def test_status_combines_code_and_phrase(self):
        message = ExceptionMessage.builder().with_status(200, "OK").build()
        assert message.status == "200 OK"

    def test_built_message_is_frozen(self):
        message = ExceptionMessage.builder().with_message("fixed").build()
        with pytest.raises(PydanticValidationError):
            message.message = "changed"

    def test_builder_is_reusable_without_affecting_built_messages(self):
        builder = ExceptionMessage.builder().with_message("first")
        first = builder.build()
        second = builder.with_message("second").build()
        assert first.message == "first"
        assert second.message == "second"


class TestBuildExceptionMessage:
    """Tests for the UnprocessableEntityError → ExceptionMessage mapping."""

    def test_missing_id_payload(self):
        exc = UnprocessableEntityError.for_missing_id(2)
        content = build_exception_message(exc, timestamp=1_700_000_000_000).to_content()
        assert content == {
            "timestamp": 1_700_000_000_000,
            "type": "Error",
            "status": "422 Unprocessable Entity",
            "message": (
                "The URL and the syntax are correct, I understand the request, "
                "but I still can't process your instructions because "
                "the requested id 2 does not exist"
            ),
        }

    @pytest.mark.parametrize(
        "detail",
        ["the requested id does not exist", "", "of reasons"],
    )
    def test_message_always_has_prefix(self, detail):
        message = build_exception_message(UnprocessableEntityError(detail=detail))
        assert message.message.startswith(MESSAGE_PREFIX)
        assert message.message == MESSAGE_PREFIX + detail

    def test_default_timestamp_is_current_epoch_millis(self):
        before = int(time.time() * 1000)
        message = build_exception_message(UnprocessableEntityError.for_missing_id(7))
        after = int(time.time() * 1000)
        assert isinstance(message.timestamp, int)
        assert before <= message.timestamp <= after

    def test_same_missing_id_formats_identically(self):
        """Apart from the timestamp the output is deterministic."""
        first = build_exception_message(UnprocessableEntityError.for_missing_id(9), timestamp=1)
        second = build_exception_message(UnprocessableEntityError.for_missing_id(9), timestamp=1)
        assert first == second
