"""
Connection diagnostics and workspace-wide playbook scan
"""

from typing import TYPE_CHECKING

from ..analyzer import analyze_document, categorize_playbooks, is_playbook
from ..clickup_client import get_client, ClickUpClient, ClickUpError
from ..config import Config
from ..utils.formatting import format_timestamp, preview
from ..utils.logging import logger

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

def connection_report(client: ClickUpClient, folder_id: str) -> str:
    """
    Check the token, the target folder and doc retrieval

    Args:
        client: ClickUp client to test
        folder_id: Playbooks folder ID

    Returns:
        Markdown report; failures are reported inline, never raised
    """
    result = "# API Connection Test\n\n"
    result += "**Configuration:**\n"
    result += f"- Workspace ID: {client.workspace_id or 'Not set'}\n"
    result += f"- Folder ID: {folder_id}\n"
    result += f"- API Token: {'Present' if client.api_token else 'Missing'}\n\n"

    try:
        result += "**Testing token...**\n"
        teams = client.get_workspaces()
        result += f"✅ Token accepted, {len(teams)} workspace(s) visible\n\n"

        result += "**Testing folder...**\n"
        try:
            folder = client.get_folder(folder_id)
            result += f"✅ Folder found: {folder.get('name', 'Unknown')}\n\n"
        except ClickUpError as e:
            result += f"⚠️ Folder lookup failed: {e}\n\n"

        result += "**Testing docs endpoint...**\n"
        docs = client.get_docs(folder_id)
        result += f"✅ Retrieved {len(docs)} documents\n\n"

        if docs:
            result += "**First 3 documents:**\n"
            for index, doc in enumerate(docs[:3], 1):
                result += f"{index}. **{doc.name}** (ID: {doc.id})\n"
                result += f"   - Content length: {len(doc.content)} characters\n"
                result += f"   - Created: {format_timestamp(doc.date_created)}\n"
        else:
            result += f"⚠️ No documents found in folder {folder_id}\n"
            result += "This could mean:\n"
            result += "- Wrong folder ID\n"
            result += "- No documents in the folder\n"
            result += "- API permissions issue\n"

            suggestion = client.find_playbooks_folder()
            if suggestion and str(suggestion.get("id")) != str(folder_id):
                result += f"\nA playbooks folder was found elsewhere: {suggestion.get('name')} (ID: {suggestion.get('id')})\n"

    except ClickUpError as e:
        logger.error(f"Connection test failed: {e}")
        result += f"❌ **Error:** {e}\n"

    return result

def scan_report(client: ClickUpClient) -> str:
    """
    Scan every folder in the workspace for playbook-like docs

    Returns:
        Markdown report with a per-playbook analysis and a category summary
    """
    result = "# Complete Playbook Scan\n\n"

    all_docs = client.get_all_docs()
    result += f"📊 **Scan Results:** Found {len(all_docs)} documents in workspace\n\n"

    playbooks = [doc for doc in all_docs if is_playbook(doc)]
    result += f"🎯 **Playbooks Found:** {len(playbooks)} relevant playbooks\n\n"

    if not playbooks:
        result += "⚠️ No playbooks found. Documents scanned:\n\n"
        for index, doc in enumerate(all_docs[:10], 1):
            folder_name = doc.folder.name if doc.folder else "Unknown"
            result += f"{index}. **{doc.name}** ({folder_name})\n"
        if len(all_docs) > 10:
            result += f"... and {len(all_docs) - 10} more documents\n"
        return result

    result += "## 📋 Available Playbooks\n\n"
    for index, doc in enumerate(playbooks, 1):
        analysis = analyze_document(doc)

        result += f"### {index}. **{doc.name}**\n"
        result += f"- **ID:** {doc.id}\n"
        if doc.folder:
            result += f"- **Folder:** {doc.folder.name} ({doc.folder.id})\n"
        result += f"- **Content Length:** {len(doc.content)} characters\n"
        result += f"- **Complexity:** {analysis.complexity}\n"
        if analysis.estimation:
            result += f"- **Estimation:** {analysis.estimation}\n"
        if analysis.description:
            result += f"- **Description:** {preview(analysis.description)}\n"
        if analysis.tags:
            result += f"- **Tags:** {', '.join(analysis.tags)}\n"
        result += f"- **Last Updated:** {format_timestamp(doc.date_updated)}\n\n"

    result += "## 📊 Summary by Category\n\n"
    for category, docs in categorize_playbooks(playbooks).items():
        result += f"**{category}:** {len(docs)} playbook(s)\n"
        result += "".join(f"  - {doc.name}\n" for doc in docs)
        result += "\n"

    return result

def register_diagnostic_tools(mcp: "FastMCP") -> None:
    """
    Register connection test and workspace scan tools

    Args:
        mcp: FastMCP server instance
    """

    @mcp.tool()
    def test_api_connection() -> str:
        """Test ClickUp API connection and debug data retrieval"""
        try:
            report = connection_report(get_client(), Config.PLAYBOOKS_FOLDER_ID)
            logger.info("API connection test complete")
            return report
        except Exception as e:
            logger.error(f"Unexpected error in test_api_connection: {e}", exc_info=True)
            return f"Unexpected error: {str(e)}"

    @mcp.tool()
    def scan_all_playbooks() -> str:
        """Scan the entire workspace for playbooks and summarize them by category"""
        try:
            report = scan_report(get_client())
            logger.info("Workspace playbook scan complete")
            return report
        except Exception as e:
            logger.error(f"Unexpected error in scan_all_playbooks: {e}", exc_info=True)
            return f"Unexpected error: {str(e)}"
