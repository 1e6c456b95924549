"""Shared test helpers."""

import pytest

from playbooks_mcp.schemas import Document


def make_document(doc_id="doc-1", name="Playbook", content="", **extra):
    """Build a Document with sensible defaults."""
    return Document(
        id=doc_id,
        name=name,
        content=content,
        date_created=extra.pop("date_created", "1700000000000"),
        date_updated=extra.pop("date_updated", "1700000500000"),
        folder=extra.pop("folder", {"id": "98107928", "name": "Playbooks"}),
        **extra,
    )


HUBSPOT_AUDIT = make_document(
    doc_id="hub-1",
    name="HubSpot Audit Playbook",
    content=(
        "Requirements:\n"
        "- access to HubSpot\n"
        "Estimate: 3 days\n"
        "This playbook covers a full audit of HubSpot configuration."
    ),
)


@pytest.fixture
def hubspot_audit():
    return HUBSPOT_AUDIT


@pytest.fixture
def capture_tools():
    """Register tools on a fake FastMCP and return {name: function}."""
    from unittest.mock import MagicMock

    def _capture(register):
        captured = {}
        mcp = MagicMock()

        def tool():
            def decorator(fn):
                captured[fn.__name__] = fn
                return fn
            return decorator

        def resource(uri):
            def decorator(fn):
                captured[uri] = fn
                return fn
            return decorator

        mcp.tool = tool
        mcp.resource = resource
        register(mcp)
        return captured

    return _capture
