"""
Keyword search over fetched playbooks

Ranking is a plain substring count: a document repeating one query term many
times outranks one that mentions several terms once each.
"""

from typing import Dict, List, Optional

from ..schemas import Document
from .keywords import PLAYBOOK_CONTENT_INDICATORS, PLAYBOOK_NAME_INDICATORS, SCAN_CATEGORIES

MIN_TERM_LENGTH = 3

def query_terms(query: str) -> List[str]:
    """Lower-cased whitespace tokens longer than two characters"""
    return [term for term in query.lower().split() if len(term) >= MIN_TERM_LENGTH]

def _search_text(doc: Document) -> str:
    return f"{doc.name} {doc.content}".lower()

def match_count(doc: Document, terms: List[str]) -> int:
    """Total occurrences of all terms in the document's name and content"""
    text = _search_text(doc)
    return sum(text.count(term) for term in terms)

def search_documents(docs: List[Document], query: str) -> List[Document]:
    """
    Documents containing any query term, most occurrences first

    Args:
        docs: Documents to search (may be empty)
        query: Free-text query

    Returns:
        Matching documents; equal scores keep their input order
    """
    terms = query_terms(query)
    if not terms:
        return []

    scored = []
    for doc in docs:
        text = _search_text(doc)
        if any(term in text for term in terms):
            scored.append((match_count(doc, terms), doc))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [doc for _, doc in scored]

def find_document(docs: List[Document], doc_id: str) -> Optional[Document]:
    """Document with the given ID, or None"""
    for doc in docs:
        if doc.id == doc_id:
            return doc
    return None

def is_playbook(doc: Document) -> bool:
    """Whether a workspace doc looks like a playbook"""
    name = doc.name.lower()
    content = doc.content.lower()
    return (any(word in name for word in PLAYBOOK_NAME_INDICATORS)
            or any(word in content for word in PLAYBOOK_CONTENT_INDICATORS))

def categorize_playbooks(docs: List[Document]) -> Dict[str, List[Document]]:
    """
    Group playbooks into the scan summary categories

    A doc can land in several categories; empty categories are omitted.
    """
    categories = {}
    for category, (name_words, text_words) in SCAN_CATEGORIES.items():
        members = []
        for doc in docs:
            name = doc.name.lower()
            content = doc.content.lower()
            if (any(word in name for word in name_words)
                    or any(word in name or word in content for word in text_words)):
                members.append(doc)
        if members:
            categories[category] = members
    return categories
