"""Playbook analyzer: regex field extraction, keyword search and question answering."""

from .extractors import (
    analyze_document,
    assess_complexity,
    extract_description,
    extract_estimation,
    extract_hours,
    extract_prerequisites,
    extract_requirements,
    extract_tags,
    extract_timing,
)
from .search import categorize_playbooks, find_document, is_playbook, search_documents
from .answers import answer_question

__all__ = [
    "analyze_document",
    "assess_complexity",
    "extract_description",
    "extract_estimation",
    "extract_hours",
    "extract_prerequisites",
    "extract_requirements",
    "extract_tags",
    "extract_timing",
    "categorize_playbooks",
    "find_document",
    "is_playbook",
    "search_documents",
    "answer_question",
]
