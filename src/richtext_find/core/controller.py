"""Search session controller: debounced scans, navigation and replacement."""

import dataclasses
import functools
from collections.abc import Callable
from enum import Enum
from typing import Any

from loguru import logger

from richtext_find.config import resolve_debounce_seconds
from richtext_find.core.scheduler import running_loop_scheduler
from richtext_find.core.search.matcher import find_matches
from richtext_find.core.search.navigator import next_index, previous_index
from richtext_find.core.select.sync import SelectionSync
from richtext_find.core.tree.walker import walk
from richtext_find.core.write.replace import replace_all as replace_all_matches
from richtext_find.core.write.replace import replace_one
from richtext_find.errors import HostUnavailableError, SearchTermError
from richtext_find.models.node import Match, SearchState, SearchStatus
from richtext_find.protocols import EditorProtocol, SchedulerProtocol, TimerHandle


class Phase(Enum):
    """Lifecycle of a search session."""

    CLOSED = "closed"
    OPEN = "open"
    SEARCHING = "searching"
    IDLE_WITH_MATCHES = "idle_with_matches"
    IDLE_NO_MATCHES = "idle_no_matches"


def _requires_host(default: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Turn a missing host editor into a no-op returning default."""

    def decorator(method: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(method)
        def wrapper(self: "SearchController", *args: Any, **kwargs: Any) -> Any:
            try:
                return method(self, *args, **kwargs)
            except HostUnavailableError:
                logger.debug("{}() ignored: no editor attached", method.__name__)
                return default

        return wrapper

    return decorator


class SearchController:
    """Own the search state for one editor and run the find pipeline.

    Term changes are debounced: each one cancels the pending scan and schedules
    a new one. Any replacement re-runs the pipeline immediately, since matches
    computed before a mutation cannot be trusted after it.

    Args:
        editor: Host editor. May be attached later; while absent, every method
            that needs it is a no-op.
        scheduler: Source of delayed callbacks for debouncing. Defaults to the
            asyncio loop running at construction. Without one, each term change
            is scanned immediately.
        debounce: Delay in seconds. Defaults to the configured window.
        regex: Treat terms as regular expressions instead of literal text.
        scroll: Ask the host to scroll selected matches into view.
        on_change: Called with the new SearchStatus after every state change.
    """

    def __init__(
        self,
        editor: EditorProtocol | None = None,
        *,
        scheduler: SchedulerProtocol | None = None,
        debounce: float | None = None,
        regex: bool = False,
        scroll: bool = True,
        on_change: Callable[[SearchStatus], None] | None = None,
    ) -> None:
        self._editor = editor
        self._scheduler: SchedulerProtocol | None = scheduler or running_loop_scheduler()
        self.debounce = resolve_debounce_seconds() if debounce is None else debounce
        self.regex = regex
        self.scroll = scroll
        self.on_change = on_change

        self.phase = Phase.CLOSED
        self._term = ""
        self._state = SearchState()
        self._pending: TimerHandle | None = None
        self._replacing = False

    # --- Host ---

    @property
    def editor(self) -> EditorProtocol | None:
        return self._editor

    def attach(self, editor: EditorProtocol) -> None:
        self._editor = editor

    def detach(self) -> None:
        self._cancel_pending()
        self._editor = None

    def _host(self) -> EditorProtocol:
        if self._editor is None:
            msg = "No editor attached"
            raise HostUnavailableError(msg)
        return self._editor

    # --- Read-only views ---

    @property
    def term(self) -> str:
        """The latest term, which may not have been scanned yet."""
        return self._term

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def status(self) -> SearchStatus:
        return SearchStatus(
            match_count=len(self._state.matches),
            current_index=self._state.current_index,
        )

    @property
    def has_matches(self) -> bool:
        return bool(self._state.matches)

    @property
    def scan_pending(self) -> bool:
        return self._pending is not None

    # --- Session lifecycle ---

    @_requires_host(None)
    def open(self) -> None:
        """Start a session. Nothing is scanned until a term is set."""
        self._host()
        if self.phase is not Phase.CLOSED:
            return
        self.phase = Phase.OPEN
        logger.debug("Search opened")
        self._notify()

    def close(self) -> None:
        """End the session, dropping the term, matches and cursor."""
        self._cancel_pending()
        self._term = ""
        self._state = SearchState()
        self.phase = Phase.CLOSED
        logger.debug("Search closed")
        self._notify()

    @_requires_host(None)
    def set_term(self, term: str) -> None:
        """Record a new term and (re)schedule the scan for it."""
        self._host()
        if self.phase is Phase.CLOSED:
            logger.debug("Ignoring term change while closed")
            return
        self._term = term
        self._cancel_pending()
        if self._scheduler is None:
            self._scan()
            return
        self._pending = self._scheduler.call_later(self.debounce, self._run_scheduled_scan)
        self.phase = Phase.SEARCHING
        logger.debug("Scan for {!r} scheduled in {}s", term, self.debounce)

    @_requires_host(None)
    def set_replace_term(self, text: str) -> None:
        self._host()
        if self.phase is Phase.CLOSED:
            logger.debug("Ignoring replacement text while closed")
            return
        self._state = dataclasses.replace(self._state, replace_term=text)

    @_requires_host(False)
    def flush(self) -> bool:
        """Run the pending scan now instead of waiting for the debounce.

        Returns:
            True if a scan was pending.
        """
        self._host()
        if self._pending is None:
            return False
        self._cancel_pending()
        self._scan()
        return True

    @_requires_host(None)
    def refresh(self) -> None:
        """Rescan for the current term, keeping the cursor where possible."""
        self._host()
        if self.phase is Phase.CLOSED:
            return
        self._cancel_pending()
        self._scan(keep_index=self._state.current_index)

    # --- Navigation ---

    @_requires_host(-1)
    def next(self) -> int:
        """Select the next match, wrapping to the first. Returns the new index."""
        return self._move(next_index)

    @_requires_host(-1)
    def previous(self) -> int:
        """Select the previous match, wrapping to the last. Returns the new index."""
        return self._move(previous_index)

    @_requires_host(-1)
    def go_to(self, index: int) -> int:
        """Select the match at index. Out-of-range indexes leave the cursor alone."""

        def step(state: SearchState) -> int:
            if 0 <= index < len(state.matches):
                return index
            logger.debug("No match at index {} (have {})", index, len(state.matches))
            return -1

        return self._move(step)

    def _move(self, step: Callable[[SearchState], int]) -> int:
        self._host()
        if self.phase is Phase.CLOSED:
            return -1
        if self._replacing:
            logger.warning("Rejecting navigation while a replacement is in progress")
            return self._state.current_index
        self._settle()
        index = step(self._state)
        if index == -1:
            return -1
        self._state = dataclasses.replace(self._state, current_index=index)
        if not self._select(self._state.matches[index]):
            self._scan(keep_index=index, select=False)
            return self._state.current_index
        self._notify()
        return index

    # --- Replacement ---

    @_requires_host(False)
    def replace_current(self) -> bool:
        """Replace the selected match, then rescan.

        Returns:
            True if the document was changed.
        """
        editor = self._host()
        if not self._can_replace():
            return False
        self._settle()
        match = self._state.current_match
        if match is None:
            return False

        self._replacing = True
        try:
            applied = replace_one(editor, match, self._state.replace_term)
            self._scan(keep_index=self._state.current_index)
        finally:
            self._replacing = False
        if applied:
            logger.info("Replaced match at {}", list(match.path))
        return applied

    @_requires_host(0)
    def replace_all(self) -> int:
        """Replace every match, then rescan.

        Returns:
            Number of replacements applied.
        """
        editor = self._host()
        if not self._can_replace():
            return 0
        self._settle()
        if not self._state.term or not self._state.matches:
            return 0

        self._replacing = True
        try:
            applied = replace_all_matches(editor, self._state.matches, self._state.replace_term)
            self._scan()
        finally:
            self._replacing = False
        return applied

    def _can_replace(self) -> bool:
        if self.phase is Phase.CLOSED:
            return False
        if self._replacing:
            logger.warning("Rejecting replace while another replacement is in progress")
            return False
        return True

    # --- Pipeline ---

    @_requires_host(None)
    def _run_scheduled_scan(self) -> None:
        self._pending = None
        if self.phase is Phase.CLOSED:
            return
        self._scan()

    def _settle(self) -> None:
        """Apply a scan that is still waiting out its debounce."""
        if self._pending is not None:
            self._cancel_pending()
            self._scan()

    def _scan(self, *, keep_index: int | None = None, select: bool = True) -> None:
        editor = self._host()
        term = self._term
        self.phase = Phase.SEARCHING

        error: str | None = None
        matches: list[Match]
        try:
            matches = find_matches(walk(editor.root), term, regex=self.regex)
        except SearchTermError as e:
            logger.warning("{}", e)
            matches = []
            error = e.reason

        if not matches:
            index = -1
        elif keep_index is None or keep_index < 0:
            index = 0
        else:
            index = min(keep_index, len(matches) - 1)

        self._state = SearchState(
            term=term,
            replace_term=self._state.replace_term,
            matches=tuple(matches),
            current_index=index,
            error=error,
        )
        self.phase = Phase.IDLE_WITH_MATCHES if matches else Phase.IDLE_NO_MATCHES
        logger.debug("Scan for {!r} found {} match(es)", term, len(matches))

        current = self._state.current_match
        if select and current is not None:
            self._select(current)
        self._notify()

    def _select(self, match: Match) -> bool:
        return SelectionSync(self._host(), scroll=self.scroll).apply(match)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.status)
