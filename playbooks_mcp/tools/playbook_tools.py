"""
Playbook listing and analysis tools
Modular tool registration; each tool re-fetches the folder and returns markdown
"""

from typing import TYPE_CHECKING

from ..analyzer import analyze_document, find_document, search_documents
from ..clickup_client import fetch_playbooks, ClickUpError
from ..config import Config
from ..utils.formatting import (
    render_analysis,
    render_estimations,
    render_requirements,
    render_search_results,
)
from ..utils.validators import resolve_playbook_ref, validate_search_query, ValidationError
from ..utils.logging import logger

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

def register_playbook_tools(mcp: "FastMCP") -> None:
    """
    Register all playbook listing and analysis tools

    Args:
        mcp: FastMCP server instance
    """

    @mcp.tool()
    def search_playbooks(query: str) -> str:
        """
        Search for playbooks in the playbooks folder

        Matches any query word longer than two characters against playbook
        titles and content, most mentions first.

        Args:
            query: Search query for playbooks
        """
        try:
            query = validate_search_query(query)

            docs = fetch_playbooks()
            results = search_documents(docs, query)

            logger.info(f"search_playbooks '{query}' matched {len(results)} of {len(docs)} playbooks")
            return render_search_results(docs, results, query, Config.PLAYBOOKS_FOLDER_ID)

        except ValidationError as e:
            logger.warning(f"Validation error in search_playbooks: {e}")
            return f"Validation error: {str(e)}"
        except ClickUpError as e:
            logger.error(f"ClickUp error in search_playbooks: {e}")
            return f"Error accessing ClickUp: {str(e)}"
        except Exception as e:
            logger.error(f"Unexpected error in search_playbooks: {e}", exc_info=True)
            return f"Unexpected error: {str(e)}"

    @mcp.tool()
    def get_playbook_estimations() -> str:
        """Get time estimations and complexity from all playbooks"""
        try:
            docs = fetch_playbooks()
            logger.info(f"Estimating {len(docs)} playbooks")
            return render_estimations(docs)

        except ClickUpError as e:
            logger.error(f"ClickUp error in get_playbook_estimations: {e}")
            return f"Error accessing ClickUp: {str(e)}"
        except Exception as e:
            logger.error(f"Unexpected error in get_playbook_estimations: {e}", exc_info=True)
            return f"Unexpected error: {str(e)}"

    @mcp.tool()
    def get_playbook_requirements() -> str:
        """Get requirements from all playbooks"""
        try:
            docs = fetch_playbooks()
            logger.info(f"Collecting requirements from {len(docs)} playbooks")
            return render_requirements(docs)

        except ClickUpError as e:
            logger.error(f"ClickUp error in get_playbook_requirements: {e}")
            return f"Error accessing ClickUp: {str(e)}"
        except Exception as e:
            logger.error(f"Unexpected error in get_playbook_requirements: {e}", exc_info=True)
            return f"Unexpected error: {str(e)}"

    @mcp.tool()
    def analyze_playbook(playbook_id: str) -> str:
        """
        Analyze a specific playbook for estimation, requirements, and complexity

        Args:
            playbook_id: ClickUp doc ID, or its clickup://playbook/<id> resource URI
        """
        try:
            playbook_id = resolve_playbook_ref(playbook_id)

            doc = find_document(fetch_playbooks(), playbook_id)
            if not doc:
                logger.warning(f"analyze_playbook: playbook {playbook_id} not found")
                return f"Error: Playbook not found: {playbook_id}"

            analysis = analyze_document(doc)
            logger.info(f"Analyzed playbook: {doc.name}")
            return render_analysis(doc, analysis)

        except ValidationError as e:
            logger.warning(f"Validation error in analyze_playbook: {e}")
            return f"Validation error: {str(e)}"
        except ClickUpError as e:
            logger.error(f"ClickUp error in analyze_playbook: {e}")
            return f"Error accessing ClickUp: {str(e)}"
        except Exception as e:
            logger.error(f"Unexpected error in analyze_playbook: {e}", exc_info=True)
            return f"Unexpected error: {str(e)}"
