"""ClickUp Playbooks CLI."""

import sys

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

console = Console()


def _require_config():
    from .config import Config

    try:
        Config.validate()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


@click.group()
def main():
    """ClickUp Playbooks - search and analyze playbook docs."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"clickup-playbooks-mcp v{__version__}")


@main.command()
def serve():
    """Run the MCP server over stdio."""
    from .server import main as run_server

    run_server()


@main.command()
def check():
    """Test the ClickUp API connection."""
    from .clickup_client import get_client
    from .config import Config
    from .tools.diagnostic_tools import connection_report

    _require_config()
    console.print(Markdown(connection_report(get_client(), Config.PLAYBOOKS_FOLDER_ID)))


@main.command(name="list")
def list_playbooks():
    """List playbooks in the configured folder."""
    from .analyzer import analyze_document
    from .clickup_client import fetch_playbooks

    _require_config()
    docs = fetch_playbooks()

    if not docs:
        console.print("[yellow]No playbooks found[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Complexity")
    table.add_column("Estimation")

    for doc in docs:
        analysis = analyze_document(doc)
        style = {"high": "red", "medium": "yellow", "low": "green"}.get(analysis.complexity, "dim")
        table.add_row(
            doc.id,
            doc.name[:50],
            f"[{style}]{analysis.complexity}[/{style}]",
            analysis.estimation or "-",
        )

    console.print(table)


@main.command()
@click.argument("playbook_id")
def analyze(playbook_id: str):
    """Analyze a single playbook (doc ID or clickup://playbook/<id>)."""
    from .analyzer import analyze_document, find_document
    from .clickup_client import fetch_playbooks
    from .utils.formatting import render_analysis
    from .utils.validators import resolve_playbook_ref, ValidationError

    _require_config()
    try:
        playbook_id = resolve_playbook_ref(playbook_id)
    except ValidationError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    doc = find_document(fetch_playbooks(), playbook_id)

    if not doc:
        console.print(f"[red]Playbook not found: {playbook_id}[/red]")
        sys.exit(1)

    console.print(Markdown(render_analysis(doc, analyze_document(doc))))


@main.command()
@click.argument("question")
def ask(question: str):
    """Ask a question about the playbooks."""
    from .analyzer import answer_question
    from .clickup_client import fetch_playbooks

    _require_config()
    console.print(Markdown(answer_question(fetch_playbooks(), question)))


@main.command()
@click.argument("question")
def recommend(question: str):
    """Recommend playbooks for a client issue."""
    from .analyzer import search_documents
    from .clickup_client import fetch_playbooks
    from .config import Config
    from .utils.formatting import render_recommendations

    _require_config()
    docs = fetch_playbooks()
    results = search_documents(docs, question)
    console.print(Markdown(render_recommendations(question, docs, results, Config.WORKSPACE_ID)))


if __name__ == "__main__":
    main()
