"""Write documents back to JSON files, skipping unchanged output."""

import json
from pathlib import Path

from loguru import logger

from richtext_find.core.importer.json_reader import dump_document_data
from richtext_find.models.node import Block


def render_document(root: Block) -> str:
    """Serialize a document tree the way it is stored on disk."""
    return json.dumps(dump_document_data(root), ensure_ascii=False, indent=2) + "\n"


class DocumentWriter:
    """Write one document file.

    - Do not touch the file if its contents would not change.
    - In dry-run mode, only log what would be written.
    """

    def __init__(self, path: str | Path, *, dry_run: bool = False) -> None:
        self.path = Path(path).expanduser().resolve()
        self.dry_run = dry_run

        if not self.dry_run and not self.path.parent.is_dir():
            msg = f"Output directory {str(self.path.parent)!r} not found"
            raise ValueError(msg)

        logger.debug("Writer ready, path {!r}, dry_run {!r}", str(self.path), dry_run)

    def write(self, root: Block) -> str:
        """Write the document.

        Returns:
            "same" if the file already held this content, otherwise "create"
            or "update" (also under dry-run, where nothing is written).
        """
        contents = render_document(root)

        action = "create"
        try:
            with open(self.path, encoding="utf-8") as f:
                if f.read() == contents:
                    logger.debug("Unchanged: {!r}", str(self.path))
                    return "same"
            action = "update"
        except (FileNotFoundError, UnicodeDecodeError):
            pass

        if self.dry_run:
            logger.info("dry-run: would {} {!r}", action, str(self.path))
        else:
            logger.info("Writing ({}) {!r}", action, str(self.path))
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(contents)
        return action
