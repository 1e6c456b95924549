"""Schema package

Single source of truth for the data that flows between the ClickUp client,
the analyzer and the tool layer.
"""

from .models import (
    Complexity,
    Creator,
    FolderRef,
    Document,
    PlaybookAnalysis
)

__all__ = [
    "Complexity",
    "Creator",
    "FolderRef",
    "Document",
    "PlaybookAnalysis",
]
