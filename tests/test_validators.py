"""Tests for input validators."""

import pytest

from playbooks_mcp.utils.validators import (
    ValidationError,
    parse_playbook_uri,
    playbook_uri,
    resolve_playbook_ref,
    validate_playbook_id,
    validate_question,
    validate_search_query,
)


class TestValidateSearchQuery:
    def test_strips_whitespace(self):
        assert validate_search_query("  hubspot audit  ") == "hubspot audit"

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_rejects_empty(self, query):
        with pytest.raises(ValidationError, match="Search query is required"):
            validate_search_query(query)

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            validate_search_query("a" * 501)


class TestValidateQuestion:
    def test_accepts_question(self):
        assert validate_question("What do I need?") == "What do I need?"

    def test_rejects_blank(self):
        with pytest.raises(ValidationError, match="Question is required"):
            validate_question("  ")

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            validate_question("a" * 1001)


class TestValidatePlaybookId:
    @pytest.mark.parametrize("playbook_id", ["2ky4v6a-1234", "98107928", "doc_1"])
    def test_accepts_clickup_ids(self, playbook_id):
        assert validate_playbook_id(playbook_id) == playbook_id

    def test_rejects_empty(self):
        with pytest.raises(ValidationError, match="Playbook ID is required"):
            validate_playbook_id("")

    @pytest.mark.parametrize("playbook_id", ["../etc/passwd", "doc 1", "-leading"])
    def test_rejects_malformed(self, playbook_id):
        with pytest.raises(ValidationError, match="Invalid playbook ID format"):
            validate_playbook_id(playbook_id)

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            validate_playbook_id("a" * 101)


class TestPlaybookUri:
    def test_build_and_parse(self):
        uri = playbook_uri("2ky4v6a-1234")
        assert uri == "clickup://playbook/2ky4v6a-1234"
        assert parse_playbook_uri(uri) == "2ky4v6a-1234"

    @pytest.mark.parametrize("uri", ["", "clickup://playbooks", "file:///etc/passwd"])
    def test_rejects_other_uris(self, uri):
        with pytest.raises(ValidationError, match="Invalid resource URI"):
            parse_playbook_uri(uri)

    def test_rejects_missing_id(self):
        with pytest.raises(ValidationError, match="Playbook ID is required"):
            parse_playbook_uri("clickup://playbook/")


class TestResolvePlaybookRef:
    def test_bare_id(self):
        assert resolve_playbook_ref(" 2ky4v6a-1234 ") == "2ky4v6a-1234"

    def test_resource_uri(self):
        assert resolve_playbook_ref("clickup://playbook/2ky4v6a-1234") == "2ky4v6a-1234"

    def test_uri_with_bad_id(self):
        with pytest.raises(ValidationError, match="Invalid playbook ID format"):
            resolve_playbook_ref("clickup://playbook/../secret")

    def test_other_scheme_is_not_an_id(self):
        with pytest.raises(ValidationError, match="Invalid playbook ID format"):
            resolve_playbook_ref("file:///etc/passwd")
