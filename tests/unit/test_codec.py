"""
Unit tests for JSON decoding and error body parsing.
"""

from typing import Dict, List

import pytest

from gitlab_rest.runtime.codec import decode_json, parse_error_message
from gitlab_rest.runtime.errors import DecodeError
from gitlab_rest.v4.types import ProjectRepositoryStorageMove


@pytest.mark.unit
class TestDecodeJson:
    """decode_json is generic over the target shape."""

    def test_single_object(self):
        move = decode_json('{"id": 5, "state": "finished"}', ProjectRepositoryStorageMove)
        assert move.id == 5
        assert move.state == "finished"

    def test_sequence_keeps_order(self):
        moves = decode_json('[{"id": 3}, {"id": 1}, {"id": 2}]', List[ProjectRepositoryStorageMove])
        assert [m.id for m in moves] == [3, 1, 2]

    def test_plain_dict(self):
        assert decode_json(b'{"a": 1}', Dict[str, int]) == {"a": 1}

    def test_malformed_json(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_json('{"id": 1', ProjectRepositoryStorageMove)
        assert exc_info.value.message == "Invalid JSON response"
        assert exc_info.value.cause is not None

    def test_shape_mismatch(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_json('{"id": 1}', List[ProjectRepositoryStorageMove])
        assert "does not match" in exc_info.value.message

    def test_wrong_field_type(self):
        with pytest.raises(DecodeError):
            decode_json('{"id": "not-a-number"}', ProjectRepositoryStorageMove)


@pytest.mark.unit
class TestParseErrorMessage:
    """GitLab error bodies are flattened into one message."""

    def test_plain_message(self):
        assert parse_error_message('{"message": "404 Not Found"}') == "404 Not Found"

    def test_field_errors_sorted(self):
        body = '{"message": {"path": ["is invalid"], "name": ["has already been taken", "is too long"]}}'
        assert parse_error_message(body) == (
            "{name: [has already been taken, is too long], path: [is invalid]}"
        )

    def test_list_message(self):
        assert parse_error_message('{"message": ["first", "second"]}') == "[first, second]"

    def test_oauth_error(self):
        body = '{"error": "invalid_token", "error_description": "Token was revoked"}'
        assert parse_error_message(body) == "invalid_token: Token was revoked"

    def test_error_without_description(self):
        assert parse_error_message('{"error": "insufficient_scope"}') == "insufficient_scope"

    @pytest.mark.parametrize("body", [None, "", b"", "<html>oops</html>", "[1, 2]", '{"other": 1}'])
    def test_unrecognized_bodies(self, body):
        assert parse_error_message(body) is None

    def test_deeply_nested_body(self):
        """Pathological nesting is treated as an unrecognized body."""
        depth = 100000
        body = '{"message":' + "[" * depth + "]" * depth + "}"
        assert parse_error_message(body) is None
        assert parse_error_message(body.encode()) is None

    def test_moderately_nested_message(self):
        body = '{"message": {"base": [["a", ["b"]]]}}'
        assert parse_error_message(body) == "{base: [[a, [b]]]}"
