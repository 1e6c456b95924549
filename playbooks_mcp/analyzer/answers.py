"""
Templated answers to free-text questions about playbooks

The question is triaged by keyword, in this order:
estimation -> requirements -> description -> general search.
"""

from typing import List

from ..schemas import Document, PlaybookAnalysis
from .extractors import analyze_document
from .search import search_documents

TOP_RESULTS = 3

ESTIMATION_KEYWORDS = ('estimate', 'time', 'duration')
REQUIREMENT_KEYWORDS = ('requirement', 'need', 'prerequisite')
DESCRIPTION_KEYWORDS = ('description', 'what', 'how')

NO_ESTIMATIONS = "No estimation information found in the available playbooks."
NO_REQUIREMENTS = "No specific requirements found in the available playbooks."
NO_RELEVANT_PLAYBOOKS = "No relevant playbooks found for your question."
NO_RELEVANT_DOCUMENTS = "I couldn't find any relevant documents for your question."

def answer_question(docs: List[Document], question: str) -> str:
    """
    Answer a question from the fetched playbooks

    Args:
        docs: All playbooks in the folder (may be empty)
        question: Free-text question

    Returns:
        Markdown answer, or a canned message when nothing relevant is found
    """
    lowered = question.lower()

    if any(keyword in lowered for keyword in ESTIMATION_KEYWORDS):
        return answer_estimation_question(docs)

    if any(keyword in lowered for keyword in REQUIREMENT_KEYWORDS):
        return answer_requirements_question(docs)

    if any(keyword in lowered for keyword in DESCRIPTION_KEYWORDS):
        return answer_description_question(docs, question)

    relevant = search_documents(docs, question)[:TOP_RESULTS]
    if not relevant:
        return NO_RELEVANT_DOCUMENTS

    return format_general_answer(relevant, [analyze_document(doc) for doc in relevant])

def answer_estimation_question(docs: List[Document]) -> str:
    analyses = [(doc, analyze_document(doc)) for doc in docs]
    analyses = [(doc, analysis) for doc, analysis in analyses if analysis.estimation]

    if not analyses:
        return NO_ESTIMATIONS

    response = "Here are the estimations found:\n\n"
    for doc, analysis in analyses:
        response += f"**{doc.name}**: {analysis.estimation}\n"
        if analysis.complexity != 'unknown':
            response += f"  - Complexity: {analysis.complexity}\n"
        response += "\n"

    return response

def answer_requirements_question(docs: List[Document]) -> str:
    analyses = [(doc, analyze_document(doc)) for doc in docs]
    analyses = [(doc, analysis) for doc, analysis in analyses if analysis.requirements]

    if not analyses:
        return NO_REQUIREMENTS

    response = "Here are the requirements found:\n\n"
    for doc, analysis in analyses:
        response += f"**{doc.name}**:\n"
        for requirement in analysis.requirements:
            response += f"  - {requirement}\n"
        response += "\n"

    return response

def answer_description_question(docs: List[Document], question: str) -> str:
    relevant = search_documents(docs, question)[:TOP_RESULTS]

    if not relevant:
        return NO_RELEVANT_PLAYBOOKS

    response = "Here are the relevant playbooks:\n\n"
    for doc in relevant:
        analysis = analyze_document(doc)
        response += f"**{doc.name}**\n"
        response += f"{analysis.description or 'No description available'}\n"

        if analysis.tags:
            response += f"Tags: {', '.join(analysis.tags)}\n"

        if analysis.estimation:
            response += f"Estimated time: {analysis.estimation}\n"

        response += "\n"

    return response

def format_general_answer(docs: List[Document], analyses: List[PlaybookAnalysis]) -> str:
    response = f"Found {len(docs)} relevant playbook(s):\n\n"

    for doc, analysis in zip(docs, analyses):
        response += f"**{doc.name}**\n"
        response += f"{analysis.description or 'No description available'}\n"

        if analysis.estimation:
            response += f"⏱️ Estimation: {analysis.estimation}\n"

        if analysis.requirements:
            shown = ', '.join(analysis.requirements[:TOP_RESULTS])
            more = '...' if len(analysis.requirements) > TOP_RESULTS else ''
            response += f"📋 Requirements: {shown}{more}\n"

        if analysis.tags:
            response += f"🏷️ Tags: {', '.join(analysis.tags)}\n"

        response += "\n"

    return response
