"""
Input validation utilities for tool arguments and resource URIs
"""

import re

PLAYBOOK_URI_PREFIX = "clickup://playbook/"

# ClickUp doc ids look like "2ky4v6a-1234"; numeric ids are also accepted
_PLAYBOOK_ID_PATTERN = r'^[A-Za-z0-9][A-Za-z0-9_-]*$'

class ValidationError(Exception):
    """Custom exception for validation errors"""
    pass

def validate_search_query(query: str) -> str:
    """
    Validate and sanitize a search query

    Args:
        query: Search query to validate

    Returns:
        Stripped search query

    Raises:
        ValidationError: If query is missing, blank or too long
    """
    if not query or not query.strip():
        raise ValidationError("Search query is required")

    query = query.strip()

    if len(query) > 500:
        raise ValidationError("Search query too long (max: 500 characters)")

    return query

def validate_question(question: str) -> str:
    """
    Validate a free-text question about playbooks

    Args:
        question: Question to validate

    Returns:
        Stripped question

    Raises:
        ValidationError: If question is missing, blank or too long
    """
    if not question or not question.strip():
        raise ValidationError("Question is required")

    question = question.strip()

    if len(question) > 1000:
        raise ValidationError("Question too long (max: 1000 characters)")

    return question

def validate_playbook_id(playbook_id: str) -> str:
    """
    Validate a ClickUp doc ID

    Args:
        playbook_id: Playbook (doc) ID to validate

    Returns:
        Stripped playbook ID

    Raises:
        ValidationError: If the ID is missing or malformed
    """
    if not playbook_id or not playbook_id.strip():
        raise ValidationError("Playbook ID is required")

    playbook_id = playbook_id.strip()

    if len(playbook_id) > 100:
        raise ValidationError("Playbook ID too long (max: 100 characters)")

    if not re.match(_PLAYBOOK_ID_PATTERN, playbook_id):
        raise ValidationError(f"Invalid playbook ID format: {playbook_id}")

    return playbook_id

def playbook_uri(playbook_id: str) -> str:
    """Resource URI for a playbook"""
    return f"{PLAYBOOK_URI_PREFIX}{playbook_id}"

def parse_playbook_uri(uri: str) -> str:
    """
    Extract the playbook ID from a clickup://playbook/<id> URI

    Raises:
        ValidationError: If the URI uses another scheme or has no ID
    """
    if not uri or not uri.startswith(PLAYBOOK_URI_PREFIX):
        raise ValidationError(f"Invalid resource URI: {uri}")

    return validate_playbook_id(uri[len(PLAYBOOK_URI_PREFIX):])

def resolve_playbook_ref(value: str) -> str:
    """
    Playbook ID from either a bare ID or a clickup://playbook/<id> URI

    The catalog resource lists URIs, so callers may pass either form.

    Raises:
        ValidationError: If the value is neither a valid ID nor a playbook URI
    """
    if value and value.strip().startswith(PLAYBOOK_URI_PREFIX):
        return parse_playbook_uri(value.strip())

    return validate_playbook_id(value)
