"""MCP server exposing find-and-replace over rich-text JSON documents."""

from pathlib import Path
from typing import Any

from loguru import logger
from mcp.server.fastmcp import FastMCP

from richtext_find.config import DEFAULT_RESULT_LIMIT, MAX_RESULT_LIMIT, SNIPPET_CONTEXT_CHARS
from richtext_find.core.controller import SearchController
from richtext_find.core.importer.json_reader import load_document
from richtext_find.core.scheduler import ManualScheduler
from richtext_find.core.search.matcher import find_matches
from richtext_find.core.tree.walker import walk
from richtext_find.editor import InMemoryEditor
from richtext_find.errors import SearchTermError
from richtext_find.models.node import Block, Match
from richtext_find.writer import DocumentWriter


def _snippet(text: str, match: Match) -> str:
    start = max(0, match.anchor_offset - SNIPPET_CONTEXT_CHARS)
    end = min(len(text), match.focus_offset + SNIPPET_CONTEXT_CHARS)
    prefix = "..." if start > 0 else ""
    suffix = "..." if end < len(text) else ""
    return (
        f"{prefix}{text[start : match.anchor_offset]}"
        f"**{text[match.anchor_offset : match.focus_offset]}**"
        f"{text[match.focus_offset : end]}{suffix}"
    )


def _load(path: Path) -> Block | dict[str, Any]:
    """Load a document, or return an error dict."""
    try:
        return load_document(path)
    except FileNotFoundError:
        return {"error": f"Document '{path}' not found."}
    except (OSError, ValueError) as e:
        return {"error": f"Cannot read document '{path}': {e}"}


# --- Core functions (testable without MCP context) ---


def document_find(
    path: Path,
    *,
    term: str = "",
    regex: bool = False,
    limit: int = DEFAULT_RESULT_LIMIT,
    offset: int = 0,
) -> dict[str, Any]:
    """Find occurrences of a term in a document, leaf by leaf.

    Args:
        path: JSON document file.
        term: Search text, matched case-insensitively.
        regex: Treat term as a regular expression.
        limit: Max results (1-500).
        offset: Pagination offset.
    """
    if not term:
        return {"error": "No search term provided.", "results": [], "count": 0, "total": 0}

    limit = max(1, min(limit, MAX_RESULT_LIMIT))
    offset = max(0, offset)

    root = _load(path)
    if isinstance(root, dict):
        return {**root, "results": [], "count": 0, "total": 0}

    refs = walk(root)
    try:
        matches = find_matches(refs, term, regex=regex)
    except SearchTermError as e:
        return {"error": str(e), "results": [], "count": 0, "total": 0}

    text_by_path = {ref.path: ref.text for ref in refs}
    page = matches[offset : offset + limit]
    results = [
        {
            "index": offset + i,
            "path": list(m.path),
            "anchor_offset": m.anchor_offset,
            "focus_offset": m.focus_offset,
            "snippet": _snippet(text_by_path[m.path], m),
        }
        for i, m in enumerate(page)
    ]

    output: dict[str, Any] = {
        "results": results,
        "count": len(results),
        "total": len(matches),
        "has_more": offset + len(results) < len(matches),
    }
    if output["has_more"]:
        output["next_offset"] = offset + limit
    return output


def document_replace(
    path: Path,
    *,
    term: str,
    replacement: str,
    index: int | None = None,
    regex: bool = False,
    dry_run: bool = False,
    output: Path | None = None,
) -> dict[str, Any]:
    """Replace one occurrence (by index) or all occurrences of a term.

    Args:
        path: JSON document file, rewritten in place unless output is set.
        term: Search text.
        replacement: Replacement text.
        index: Index of the occurrence to replace, as reported by document_find.
            None replaces every occurrence.
        regex: Treat term as a regular expression.
        dry_run: Report what would change without writing the file.
        output: Write the result here instead of rewriting path.
    """
    if not term:
        return {"error": "No search term provided."}

    root = _load(path)
    if isinstance(root, dict):
        return root

    editor = InMemoryEditor(root)
    controller = SearchController(
        editor, scheduler=ManualScheduler(), debounce=0, regex=regex, scroll=False
    )
    controller.open()
    controller.set_term(term)
    controller.set_replace_term(replacement)
    controller.flush()

    if controller.state.error:
        return {"error": f"Invalid search term {term!r}: {controller.state.error}"}

    matches_before = controller.status.match_count
    if index is None:
        replaced = controller.replace_all()
    else:
        if not 0 <= index < matches_before:
            return {"error": f"No match at index {index} ({matches_before} found)."}
        controller.go_to(index)
        replaced = 1 if controller.replace_current() else 0

    target = output or path
    file_action = "same"
    if replaced or target != path:
        try:
            file_action = DocumentWriter(target, dry_run=dry_run).write(editor.root)
        except (OSError, ValueError) as e:
            return {"error": f"Cannot write document '{target}': {e}"}

    return {
        "success": True,
        "replaced": replaced,
        "matches_before": matches_before,
        "remaining": controller.status.match_count,
        "file": file_action,
        "dry_run": dry_run,
    }


def document_leaves(path: Path) -> dict[str, Any]:
    """List the text leaves of a document in reading order."""
    root = _load(path)
    if isinstance(root, dict):
        return {**root, "leaves": [], "count": 0}
    refs = walk(root)
    return {
        "leaves": [{"path": list(r.path), "text": r.text} for r in refs],
        "count": len(refs),
    }


# --- MCP Server Setup ---


mcp_server = FastMCP(
    "richtext-find",
    instructions="""\
Find and replace text inside rich-text JSON documents (Slate/Plate editor values).

Text is stored in leaves (text runs) addressed by a path of child indices.
Matching is case-insensitive and done per leaf: a word split across two
differently formatted runs is not found.

## Workflow
1. Call document_find_tool to list occurrences with their index and snippet.
2. Call document_replace_tool with an index to replace one occurrence, or
   without one to replace all of them. Indexes change after every replacement,
   so search again before replacing by index a second time.
3. Use dry_run=true to preview without writing the file.
""",
)


@mcp_server.tool()
async def document_find_tool(
    file: str,
    term: str,
    regex: bool = False,
    limit: int = DEFAULT_RESULT_LIMIT,
    offset: int = 0,
) -> dict[str, Any]:
    """Find occurrences of a term in a JSON document.

    Pagination: When has_more is true, use next_offset in a follow-up call.

    Args:
        file: Path to the JSON document.
        term: Search text (case-insensitive, literal unless regex is set).
        regex: Treat term as a regular expression.
        limit: Max results (1-500, default 50).
        offset: Pagination offset.
    """
    return document_find(Path(file), term=term, regex=regex, limit=limit, offset=offset)


@mcp_server.tool()
async def document_replace_tool(
    file: str,
    term: str,
    replacement: str,
    index: int | None = None,
    regex: bool = False,
    dry_run: bool = False,
    output: str | None = None,
) -> dict[str, Any]:
    """Replace one or all occurrences of a term and save the document.

    Args:
        file: Path to the JSON document.
        term: Search text.
        replacement: Replacement text.
        index: Occurrence index from document_find_tool (omit to replace all).
        regex: Treat term as a regular expression.
        dry_run: Report changes without writing the file.
        output: Save to this path instead of overwriting file.
    """
    return document_replace(
        Path(file),
        term=term,
        replacement=replacement,
        index=index,
        regex=regex,
        dry_run=dry_run,
        output=Path(output) if output else None,
    )


@mcp_server.tool()
async def document_leaves_tool(file: str) -> dict[str, Any]:
    """List a document's text leaves with their paths, in reading order.

    Args:
        file: Path to the JSON document.
    """
    return document_leaves(Path(file))


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from richtext_find.logging_config import configure_logging

    configure_logging(verbose=False)
    logger.info("Starting richtext-find MCP server")
    mcp_server.run(transport="stdio")
