"""Reading and writing the task file as a JSON document.

The repository above this layer decides what the document means; this
module only moves bytes between disk and dicts. Failures come back as
``Err(str)`` so a broken task file never takes the session down.
"""

import json
import logging
from pathlib import Path
from typing import Any

from jot.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"
TEMP_SUFFIX = ".tmp"


class JsonStorage:
    """Whole-document JSON access for one task file at a time.

    Example:
        storage = JsonStorage()
        match storage.read_document(Path("tasks.json")):
            case Ok(value=document):
                print(document["version"])
            case Err(error=reason):
                print(reason)
    """

    def read_document(self, path: Path) -> Result[dict[str, Any], str]:
        """Read the task file, which must hold a single JSON object."""
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Err(f"No task file at {path}")
        except OSError as e:
            return Err(f"Cannot read task file {path}: {e.strerror or e}")

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            return Err(f"Task file {path} is not valid JSON (line {e.lineno}, column {e.colno})")
        if not isinstance(document, dict):
            return Err(f"Task file {path} must hold a JSON object, found {type(document).__name__}")
        return Ok(document)

    def write_document(self, path: Path, document: dict[str, Any]) -> Result[None, str]:
        """Replace the task file with document.

        The text goes to ``<name>.tmp`` beside the target and is then
        renamed over it, so readers see either the old file or the new one.
        """
        tmp_path = path.with_name(path.name + TEMP_SUFFIX)
        try:
            content = json.dumps(document, indent=2)
        except TypeError as e:
            return Err(f"Task data cannot be written as JSON: {e}")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            return Err(f"Cannot write task file {path}: {e.strerror or e}")

        logger.debug(f"Wrote {len(content)} bytes to {path}")
        return Ok(None)

    def move_aside(self, path: Path) -> Result[Path, str]:
        """Rename path to ``<name>.bak``, replacing an older backup."""
        backup = path.with_name(path.name + BACKUP_SUFFIX)
        try:
            path.replace(backup)
        except OSError as e:
            return Err(f"Cannot move {path} to {backup}: {e.strerror or e}")
        return Ok(backup)
