"""
ClickUp Playbooks MCP Server
FastMCP server exposing playbook search, analysis and question answering

Architecture:
- Modular tool organization (tools/)
- Stateless: every call re-fetches the playbooks folder
- Errors are returned as text, never as protocol faults
- Logging to stderr
"""

from mcp.server.fastmcp import FastMCP

from .analyzer import analyze_document, find_document
from .clickup_client import fetch_playbooks, ClickUpError
from .config import Config
from .tools.playbook_tools import register_playbook_tools
from .tools.question_tools import register_question_tools
from .tools.diagnostic_tools import register_diagnostic_tools
from .utils.formatting import render_catalog, render_playbook_resource
from .utils.validators import validate_playbook_id, ValidationError
from .utils.logging import logger

def create_server() -> FastMCP:
    """
    Create and configure the MCP server

    Returns:
        Configured FastMCP server instance

    Raises:
        ValueError: If the configuration is invalid
    """
    try:
        Config.validate()
        if Config.DEBUG:
            logger.info(Config.display())
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise

    mcp = FastMCP(Config.SERVER_NAME)

    logger.info("Registering tools...")
    register_playbook_tools(mcp)  # Search, estimations, requirements, single-playbook analysis
    register_question_tools(mcp)  # Question answering and recommendations
    register_diagnostic_tools(mcp)  # Connection test and workspace scan

    @mcp.resource("clickup://playbooks")
    def get_playbook_catalog() -> str:
        """Resource: all playbooks in the folder with their resource URIs"""
        try:
            docs = fetch_playbooks()
            logger.info(f"Generated playbook catalog with {len(docs)} playbooks")
            return render_catalog(docs)
        except Exception as e:
            logger.error(f"Error in playbook catalog resource: {e}", exc_info=True)
            return f"Error generating catalog: {str(e)}"

    @mcp.resource("clickup://playbook/{playbook_id}")
    def get_playbook(playbook_id: str) -> str:
        """Resource: one playbook with every extracted field and its original content"""
        try:
            playbook_id = validate_playbook_id(playbook_id)

            doc = find_document(fetch_playbooks(), playbook_id)
            if not doc:
                return f"Error: Playbook not found: {playbook_id}"

            return render_playbook_resource(doc, analyze_document(doc))

        except ValidationError as e:
            logger.warning(f"Validation error in playbook resource: {e}")
            return f"Validation error: {str(e)}"
        except ClickUpError as e:
            logger.error(f"ClickUp error in playbook resource: {e}")
            return f"Failed to read resource: {str(e)}"
        except Exception as e:
            logger.error(f"Error in playbook resource: {e}", exc_info=True)
            return f"Failed to read resource: {str(e)}"

    logger.info(f"Server '{Config.SERVER_NAME}' v{Config.SERVER_VERSION} ready")
    return mcp

def main():
    """Main entry point"""
    try:
        mcp = create_server()
        mcp.run()
    except Exception as e:
        logger.critical(f"Server failed to start: {e}")
        raise

if __name__ == "__main__":
    main()
