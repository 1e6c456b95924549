"""
Markdown rendering for tool and resource responses

Every MCP response is a single markdown string; the analyzer itself returns
structured values and all text layout lives here.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from ..analyzer import analyze_document
from ..config import Config
from ..schemas import Document, PlaybookAnalysis
from .validators import playbook_uri

def playbook_url(doc_id: str, workspace_id: Optional[str] = None) -> str:
    """Link to the doc in the ClickUp web app"""
    return f"{Config.APP_URL}/{workspace_id or Config.WORKSPACE_ID}/docs/{doc_id}"

def format_timestamp(value: Optional[str]) -> str:
    """ClickUp millisecond timestamp as YYYY-MM-DD"""
    if not value:
        return "Unknown"
    try:
        return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc).strftime("%Y-%m-%d")
    except (ValueError, OverflowError, OSError):
        return "Unknown"

def preview(text: str, length: Optional[int] = None) -> str:
    """First characters of a text, with an ellipsis"""
    return f"{text[:length or Config.PREVIEW_LENGTH]}..."

def table_cell(text: str) -> str:
    """Make text safe inside a pipe-delimited table row"""
    return text.replace("|", "\\|").replace("\r", " ").replace("\n", " ")

def render_search_results(all_docs: List[Document], results: List[Document],
                          query: str, folder_id: str) -> str:
    if not all_docs:
        return (f"No documents found in folder {folder_id}. "
                f"Check your folder ID and API permissions.")

    if not results:
        return (f"Found {len(all_docs)} total playbooks, but none matched \"{query}\". "
                f"Try a broader search term.")

    lines = [f"- **{doc.name}**\n  {preview(doc.content)}" for doc in results]
    return f"Found {len(results)} playbook(s) matching \"{query}\":\n\n" + "\n\n".join(lines)

def render_estimations(docs: List[Document]) -> str:
    estimations = []
    for doc in docs:
        analysis = analyze_document(doc)
        if analysis.estimation:
            estimations.append(f"**{doc.name}**: {analysis.estimation} ({analysis.complexity} complexity)")

    if not estimations:
        return "No estimation information found in playbooks"

    return "Playbook estimations:\n\n" + "\n".join(estimations)

def render_requirements(docs: List[Document]) -> str:
    sections = []
    for doc in docs:
        analysis = analyze_document(doc)
        if analysis.requirements:
            section = f"**{doc.name}**:\n"
            section += "".join(f"  - {req}\n" for req in analysis.requirements)
            sections.append(section)

    if not sections:
        return "No specific requirements found in playbooks"

    return "Playbook requirements:\n\n" + "\n".join(sections)

def render_analysis(doc: Document, analysis: PlaybookAnalysis) -> str:
    """Full analysis of a single playbook"""
    result = f"# Analysis of \"{doc.name}\"\n\n"
    result += f"**Description:** {analysis.description or 'No description available'}\n\n"
    result += f"**Estimation:** {analysis.estimation or 'No estimation found'}\n\n"
    result += f"**Hours:** {analysis.hours or 'Not specified'}\n\n"
    result += f"**Timing:** {analysis.timing or 'Not specified'}\n\n"
    result += f"**Complexity:** {analysis.complexity}\n\n"

    if analysis.requirements:
        result += "**Requirements:**\n"
        result += "".join(f"- {req}\n" for req in analysis.requirements)
        result += "\n"

    if analysis.prerequisites:
        result += "**Prerequisites:**\n"
        result += "".join(f"- {item}\n" for item in analysis.prerequisites)
        result += "\n"

    if analysis.tags:
        result += f"**Tags:** {', '.join(analysis.tags)}\n\n"

    return result

def render_playbook_resource(doc: Document, analysis: PlaybookAnalysis) -> str:
    """Playbook with every extracted field and the raw content appended"""
    result = f"# {doc.name}\n\n"
    result += f"**Description:** {analysis.description or 'No description available'}\n\n"

    if analysis.estimation:
        result += f"**Estimation:** {analysis.estimation}\n\n"
    if analysis.hours:
        result += f"**Hours:** {analysis.hours}\n\n"
    if analysis.timing:
        result += f"**Timing:** {analysis.timing}\n\n"

    if analysis.requirements:
        result += "**Requirements:**\n"
        result += "".join(f"- {req}\n" for req in analysis.requirements)
        result += "\n"

    if analysis.prerequisites:
        result += "**Prerequisites:**\n"
        result += "".join(f"- {item}\n" for item in analysis.prerequisites)
        result += "\n"

    if analysis.tags:
        result += f"**Tags:** {', '.join(analysis.tags)}\n\n"

    result += f"**Complexity:** {analysis.complexity}\n\n"
    result += f"**URL:** {playbook_url(doc.id)}\n\n"
    result += f"**Original Content:**\n{doc.content}"
    return result

def render_catalog(docs: List[Document]) -> str:
    """Folder listing with resource URIs"""
    if not docs:
        return f"No playbooks found in folder {Config.PLAYBOOKS_FOLDER_ID}."

    result = f"# Playbooks ({len(docs)})\n\n"
    for doc in docs:
        result += f"- **{doc.name}**\n"
        result += f"  ID: {doc.id}\n"
        result += f"  Resource: {playbook_uri(doc.id)}\n"
        result += f"  Updated: {format_timestamp(doc.date_updated)}\n"
    return result

def render_recommendations(question: str, all_docs: List[Document],
                           results: List[Document], workspace_id: Optional[str] = None) -> str:
    """Recommendation table followed by a per-playbook Q&A breakdown"""
    if not results:
        available = "\n".join(f"- {doc.name}" for doc in all_docs)
        return (f"No relevant playbooks found for: \"{question}\"\n\n"
                f"Available playbooks in folder:\n{available}")

    analyses: List[Tuple[Document, PlaybookAnalysis]] = [(doc, analyze_document(doc)) for doc in results]

    result = "# Playbook Recommendations\n\n"
    result += f"**Question:** {question}\n\n"
    result += f"**Found {len(results)} relevant playbook(s):**\n\n"
    result += "| Name | Description | Hours | Timing | Prerequisites | URL |\n"
    result += "|------|-------------|-------|--------|---------------|-----|\n"

    for doc, analysis in analyses:
        name = table_cell(doc.name or "Untitled")
        if analysis.description:
            description = table_cell(analysis.description[:100]) + "..."
        else:
            description = "No description available"
        hours = table_cell(analysis.hours or analysis.estimation or "Not specified")
        timing = table_cell(analysis.timing or "Not specified")
        if analysis.prerequisites:
            prerequisites = table_cell(", ".join(analysis.prerequisites[:2]))
        else:
            prerequisites = "None specified"
        url = playbook_url(doc.id, workspace_id)

        result += f"| {name} | {description} | {hours} | {timing} | {prerequisites} | [View Playbook]({url}) |\n"

    result += "\n## Detailed Analysis\n\n"

    for index, (doc, analysis) in enumerate(analyses, 1):
        prerequisites = ", ".join(analysis.prerequisites) or "No specific prerequisites mentioned"

        result += f"### {index}. {doc.name}\n\n"
        result += "**Timing Question:** How long does the playbook implementation take?\n"
        result += f"- **Answer:** {analysis.timing or analysis.estimation or 'Timeline not specified in the playbook'}\n\n"
        result += "**Prerequisites:** What playbooks are prerequisites to complete the entire process?\n"
        result += f"- **Answer:** {prerequisites}\n\n"
        result += "**Hours:** How many hours will the implementation take?\n"
        result += f"- **Answer:** {analysis.hours or 'Hours not specified'}\n\n"
        result += "**Description:** What is the playbook about?\n"
        result += f"- **Answer:** {analysis.description or 'Description not available'}\n\n"
        result += f"**URL:** {playbook_url(doc.id, workspace_id)}\n\n"

        if analysis.requirements:
            result += "**Additional Requirements:**\n"
            result += "".join(f"- {req}\n" for req in analysis.requirements)
            result += "\n"

        result += "---\n\n"

    return result
