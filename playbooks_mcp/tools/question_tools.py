"""
Question answering and recommendation tools
"""

from typing import TYPE_CHECKING

from ..analyzer import answer_question, search_documents
from ..clickup_client import fetch_playbooks, ClickUpError
from ..config import Config
from ..utils.formatting import render_recommendations
from ..utils.validators import validate_question, ValidationError
from ..utils.logging import logger

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

def register_question_tools(mcp: "FastMCP") -> None:
    """
    Register question answering tools

    Args:
        mcp: FastMCP server instance
    """

    @mcp.tool()
    def ask_playbook_question(question: str) -> str:
        """
        Ask a question about playbooks (estimation, description, requirements)

        Questions about time/estimates list every playbook's estimate,
        questions about requirements list requirements, and anything else is
        answered from the three best-matching playbooks.

        Args:
            question: Question about playbooks
        """
        try:
            question = validate_question(question)

            docs = fetch_playbooks()
            answer = answer_question(docs, question)

            logger.info(f"Answered question over {len(docs)} playbooks: '{question}'")
            return answer

        except ValidationError as e:
            logger.warning(f"Validation error in ask_playbook_question: {e}")
            return f"Validation error: {str(e)}"
        except ClickUpError as e:
            logger.error(f"ClickUp error in ask_playbook_question: {e}")
            return f"Error accessing ClickUp: {str(e)}"
        except Exception as e:
            logger.error(f"Unexpected error in ask_playbook_question: {e}", exc_info=True)
            return f"Unexpected error: {str(e)}"

    @mcp.tool()
    def recommend_playbooks(question: str) -> str:
        """
        Recommend playbooks for a client issue or question

        Returns a table (Name, Description, Hours, Timing, Prerequisites, URL)
        followed by a detailed breakdown per playbook.

        Args:
            question: The client issue or question
                      (e.g. "which playbooks do you suggest for a hubspot audit?")
        """
        try:
            question = validate_question(question)

            docs = fetch_playbooks()
            results = search_documents(docs, question)

            logger.info(f"recommend_playbooks matched {len(results)} of {len(docs)} playbooks")
            return render_recommendations(question, docs, results, Config.WORKSPACE_ID)

        except ValidationError as e:
            logger.warning(f"Validation error in recommend_playbooks: {e}")
            return f"Validation error: {str(e)}"
        except ClickUpError as e:
            logger.error(f"ClickUp error in recommend_playbooks: {e}")
            return f"Error finding playbooks: {str(e)}"
        except Exception as e:
            logger.error(f"Unexpected error in recommend_playbooks: {e}", exc_info=True)
            return f"Error finding playbooks: {str(e)}"
