"""Find and replace for tree-structured rich-text documents."""

from richtext_find.core.controller import Phase, SearchController
from richtext_find.editor import InMemoryEditor
from richtext_find.errors import (
    FindReplaceError,
    HostUnavailableError,
    SearchTermError,
    StalePathError,
    ViewUnavailableError,
)
from richtext_find.protocols import EditorProtocol, SchedulerProtocol

__all__ = [
    "EditorProtocol",
    "FindReplaceError",
    "HostUnavailableError",
    "InMemoryEditor",
    "Phase",
    "SchedulerProtocol",
    "SearchController",
    "SearchTermError",
    "StalePathError",
    "ViewUnavailableError",
]
