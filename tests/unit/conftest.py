"""Shared test fixtures."""

import copy
import json
from pathlib import Path

import pytest

from richtext_find.core.importer.json_reader import parse_document_data
from richtext_find.core.scheduler import ManualScheduler
from richtext_find.editor import InMemoryEditor
from richtext_find.models.node import Block
from tests.unit.fakes import SAMPLE_DOCUMENT


@pytest.fixture
def sample_root() -> Block:
    """Return a fresh tree of SAMPLE_DOCUMENT (mutations do not leak between tests)."""
    return parse_document_data(copy.deepcopy(SAMPLE_DOCUMENT))


@pytest.fixture
def editor(sample_root: Block) -> InMemoryEditor:
    return InMemoryEditor(sample_root)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def document_file(tmp_path: Path) -> Path:
    """Write the sample document to disk and return its path."""
    path = tmp_path / "chapter.json"
    path.write_text(json.dumps(SAMPLE_DOCUMENT), encoding="utf-8")
    return path
