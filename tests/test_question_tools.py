"""Tests for question answering and recommendation tools."""

from unittest.mock import patch

import pytest
from conftest import make_document

from playbooks_mcp.clickup_client import ClickUpError
from playbooks_mcp.config import Config
from playbooks_mcp.tools.question_tools import register_question_tools

FETCH = "playbooks_mcp.tools.question_tools.fetch_playbooks"


@pytest.fixture
def tools(capture_tools, monkeypatch):
    monkeypatch.setattr(Config, "WORKSPACE_ID", "2285500")
    monkeypatch.setattr(Config, "APP_URL", "https://app.clickup.com")
    return capture_tools(register_question_tools)


def test_registers_tools(tools):
    assert set(tools) == {"ask_playbook_question", "recommend_playbooks"}


class TestAskPlaybookQuestion:
    def test_routes_to_estimations(self, tools, hubspot_audit):
        with patch(FETCH, return_value=[hubspot_audit]):
            result = tools["ask_playbook_question"]("How much time does the audit take?")

        assert result.startswith("Here are the estimations found:")
        assert "**HubSpot Audit Playbook**: 3 days" in result

    def test_no_relevant_documents(self, tools, hubspot_audit):
        with patch(FETCH, return_value=[hubspot_audit]):
            result = tools["ask_playbook_question"]("payroll")

        assert result == "I couldn't find any relevant documents for your question."

    def test_validation_error(self, tools):
        result = tools["ask_playbook_question"]("")
        assert result == "Validation error: Question is required"

    def test_clickup_error(self, tools):
        with patch(FETCH, side_effect=ClickUpError("timeout")):
            result = tools["ask_playbook_question"]("hubspot")

        assert result == "Error accessing ClickUp: timeout"


class TestRecommendPlaybooks:
    def test_table_and_detailed_analysis(self, tools, hubspot_audit):
        onboarding = make_document("d2", "Onboarding", "welcome aboard")

        with patch(FETCH, return_value=[onboarding, hubspot_audit]):
            result = tools["recommend_playbooks"]("hubspot audit")

        url = "https://app.clickup.com/2285500/docs/hub-1"
        assert result.startswith("# Playbook Recommendations\n\n**Question:** hubspot audit")
        assert "**Found 1 relevant playbook(s):**" in result
        assert "| Name | Description | Hours | Timing | Prerequisites | URL |" in result
        assert (
            "| HubSpot Audit Playbook "
            "| This playbook covers a full audit of HubSpot configuration.... "
            "| 3 days | Not specified | None specified "
            f"| [View Playbook]({url}) |"
        ) in result
        assert "### 1. HubSpot Audit Playbook" in result
        assert "- **Answer:** 3 days" in result
        assert "- **Answer:** No specific prerequisites mentioned" in result
        assert "- **Answer:** Hours not specified" in result
        assert "**Additional Requirements:**\n- access to hubspot\n" in result
        assert "Onboarding" not in result

    def test_table_cells_escape_pipes(self, tools):
        doc = make_document("d1", "CRM | Sales", "Overview: Splits leads | contacts for the crm")

        with patch(FETCH, return_value=[doc]):
            result = tools["recommend_playbooks"]("crm")

        assert "| CRM \\| Sales |" in result
        assert "Splits leads \\| contacts for the crm..." in result

    def test_no_match_lists_available(self, tools, hubspot_audit):
        with patch(FETCH, return_value=[hubspot_audit]):
            result = tools["recommend_playbooks"]("payroll")

        assert result == (
            'No relevant playbooks found for: "payroll"\n\n'
            "Available playbooks in folder:\n- HubSpot Audit Playbook"
        )

    def test_error_message(self, tools):
        with patch(FETCH, side_effect=ClickUpError("ClickUp API error: 500 Internal Server Error")):
            result = tools["recommend_playbooks"]("hubspot")

        assert result == "Error finding playbooks: ClickUp API error: 500 Internal Server Error"
