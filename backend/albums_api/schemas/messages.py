"""
Albums API — ExceptionMessage Payload
======================================

What:  The structured, user-facing body returned when an album lookup misses.
How:   ExceptionMessage is a frozen Pydantic model. It is assembled field by
       field with ExceptionMessageBuilder; any subset of fields may be set.
Who:   build_exception_message() is called by the UnprocessableEntityError
       handler in main.py, once per failed request.

Wire format (422):
    {
        "timestamp": 1729238400000,
        "type": "Error",
        "status": "422 Unprocessable Entity",
        "message": "The URL and the syntax are correct, I understand the request,
                    but I still can't process your instructions because the
                    requested id 2 does not exist"
    }
"""

import time
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from albums_api.exceptions import UnprocessableEntityError

UNPROCESSABLE_ENTITY = 422
# Newer stdlib HTTPStatus tables renamed 422 to "Unprocessable Content";
# the payload keeps the classic phrase.
UNPROCESSABLE_ENTITY_PHRASE = "Unprocessable Entity"

MESSAGE_PREFIX = (
    "The URL and the syntax are correct, I understand the request, "
    "but I still can't process your instructions because "
)


class MessageType(str, Enum):
    """Severity of an ExceptionMessage."""
    SUCCESS = "Success"
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"


class ExceptionMessage(BaseModel):
    """Immutable error payload. Build it with ExceptionMessage.builder()."""
    timestamp: Optional[int] = Field(default=None, description="Creation time, epoch milliseconds")
    type: Optional[MessageType] = Field(default=None, description="Severity: Success, Info, Warning, Error")
    status: Optional[str] = Field(default=None, description="Status code and reason phrase")
    message: Optional[str] = Field(default=None, description="Human-readable explanation")

    model_config = {"frozen": True}

    @classmethod
    def builder(cls) -> "ExceptionMessageBuilder":
        return ExceptionMessageBuilder()

    def to_content(self) -> Dict[str, Any]:
        """JSON-ready dict containing only the fields that were set."""
        return self.model_dump(mode="json", exclude_none=True)


class ExceptionMessageBuilder:
    """
    Incremental builder for ExceptionMessage.

    Usage:
        ExceptionMessage.builder().with_type(MessageType.ERROR).with_message("...").build()
    """

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def with_timestamp(self, timestamp: int) -> "ExceptionMessageBuilder":
        self._fields["timestamp"] = timestamp
        return self

    def with_type(self, message_type: MessageType) -> "ExceptionMessageBuilder":
        self._fields["type"] = message_type
        return self

    def with_status(self, code: int, phrase: str) -> "ExceptionMessageBuilder":
        self._fields["status"] = f"{code} {phrase}"
        return self

    def with_message(self, message: str) -> "ExceptionMessageBuilder":
        self._fields["message"] = message
        return self

    def build(self) -> ExceptionMessage:
        return ExceptionMessage(**self._fields)


def current_millis() -> int:
    return int(time.time() * 1000)


def build_exception_message(
    exc: UnprocessableEntityError,
    timestamp: Optional[int] = None,
) -> ExceptionMessage:
    """
    Format an UnprocessableEntityError into its 422 payload.

    The message is always MESSAGE_PREFIX followed by the error's cause detail.
    `timestamp` defaults to the current wall-clock time in epoch milliseconds.
    """
    return (
        ExceptionMessage.builder()
        .with_timestamp(current_millis() if timestamp is None else timestamp)
        .with_type(MessageType.ERROR)
        .with_status(UNPROCESSABLE_ENTITY, UNPROCESSABLE_ENTITY_PHRASE)
        .with_message(MESSAGE_PREFIX + exc.detail)
        .build()
    )
