"""
Unit tests for the request boundary.
"""

import pytest
from unittest.mock import Mock

from talentvisa.answers import content
from talentvisa.assistant import (
    AnswerResolver,
    AnswerSource,
    ClientInputError,
    ResolutionResult,
    answer_chat_request,
    parse_chat_request,
)


class TestParseChatRequest:
    """Tests for parse_chat_request."""

    def test_message_and_resume_alias(self):
        request = parse_chat_request(
            {"message": "我适合哪个路线？", "resumeContent": "CTO"}
        )

        assert request.message == "我适合哪个路线？"
        assert request.resume_content == "CTO"

    def test_field_name_accepted(self):
        request = parse_chat_request({"message": "Hi", "resume_content": "CV"})

        assert request.resume_content == "CV"

    def test_resume_optional(self):
        assert parse_chat_request({"message": "Hi"}).resume_content is None

    @pytest.mark.parametrize("payload", [{}, {"message": ""}, None])
    def test_missing_message_rejected(self, payload):
        with pytest.raises(ClientInputError, match="No message provided"):
            parse_chat_request(payload)

    def test_malformed_payload_rejected(self):
        with pytest.raises(ClientInputError, match="Invalid request"):
            parse_chat_request({"message": ["not", "a", "string"]})

    def test_client_input_error_is_value_error(self):
        assert issubclass(ClientInputError, ValueError)


class TestAnswerChatRequest:
    """Tests for answer_chat_request."""

    def test_returns_response_only(self):
        payload = {"message": content.QUESTION_DOCUMENTS}

        body = answer_chat_request(AnswerResolver(llm=None), payload)

        assert body == {"response": content.DOCUMENTS_ANSWER}

    def test_empty_message_never_reaches_resolver(self):
        resolver = Mock()

        with pytest.raises(ClientInputError):
            answer_chat_request(resolver, {"message": ""})

        resolver.resolve.assert_not_called()

    def test_passes_resume_to_resolver(self):
        resolver = Mock()
        resolver.resolve.return_value = ResolutionResult(
            response="Answer", source=AnswerSource.MODEL
        )

        body = answer_chat_request(
            resolver, {"message": "Which route?", "resumeContent": "CV text"}
        )

        resolver.resolve.assert_called_once_with("Which route?", "CV text")
        assert body == {"response": "Answer"}
