"""Drive the host editor's selection to a match."""

from loguru import logger

from richtext_find.errors import StalePathError, ViewUnavailableError
from richtext_find.models.node import Match
from richtext_find.protocols import EditorProtocol


class SelectionSync:
    """Select matches in a host editor and scroll them into view.

    Args:
        editor: Host editor receiving the selection.
        scroll: Whether to ask the host to scroll the match into view.
    """

    def __init__(self, editor: EditorProtocol, *, scroll: bool = True) -> None:
        self.editor = editor
        self.scroll = scroll

    def apply(self, match: Match) -> bool:
        """Select match in the host editor.

        Returns:
            True if the selection was set. False if the match's path no longer
            resolves; the caller should rescan before trusting its matches again.
        """
        try:
            self.editor.select(match.selection)
        except StalePathError as e:
            logger.warning("Dropping selection of stale match: {}", e)
            return False

        if self.scroll:
            try:
                self.editor.scroll_into_view(match.path)
            except (ViewUnavailableError, StalePathError) as e:
                # The model-level selection stands even when the view cannot follow.
                logger.debug("Not scrolling to match: {}", e)
        return True
