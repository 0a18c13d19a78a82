"""
Request boundary: validates an incoming chat payload before resolution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ClientInputError

if TYPE_CHECKING:
    from .resolver import AnswerResolver


class ChatRequest(BaseModel):
    """Incoming chat payload: a question plus optional resume text."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: str = ""
    resume_content: str | None = Field(default=None, alias="resumeContent")


def parse_chat_request(payload: dict[str, Any] | None) -> ChatRequest:
    """
    Validate a raw payload.

    Raises:
        ClientInputError: The payload is malformed or has no message.
    """
    try:
        request = ChatRequest.model_validate(payload or {})
    except ValidationError as e:
        raise ClientInputError(f"Invalid request: {e}") from e

    if not request.message:
        raise ClientInputError("No message provided")
    return request


def answer_chat_request(
    resolver: "AnswerResolver",
    payload: dict[str, Any] | None,
) -> dict[str, str]:
    """Validate a payload and resolve it to the {"response": ...} boundary shape."""
    request = parse_chat_request(payload)
    result = resolver.resolve(request.message, request.resume_content)
    return result.to_dict()
