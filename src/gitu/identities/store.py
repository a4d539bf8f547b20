"""Persistence for the identity store."""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from ..errors import StoreCorruptError
from .models import Store

logger = logging.getLogger(__name__)


class IdentityStore:
    """Reads and writes the identity store file."""

    def __init__(self, path: str | Path):
        """Initialize the store.

        Args:
            path: Location of the JSON store file (``~`` is expanded)
        """
        self.path = Path(path).expanduser()

    def read(self) -> Store:
        """Read the store file strictly.

        Returns:
            Parsed store, or an empty one if the file does not exist

        Raises:
            StoreCorruptError: If the file is not a valid store document
        """
        if not self.path.exists():
            return Store()

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreCorruptError(self.path, str(e)) from e

        try:
            return Store.model_validate(data)
        except ValidationError as e:
            raise StoreCorruptError(
                self.path, f"{e.error_count()} validation error(s)"
            ) from e

    def load(self) -> Store:
        """Load the store, substituting an empty one for a corrupt file.

        The corrupt file is left on disk; it is only replaced by the next
        save.
        """
        try:
            return self.read()
        except StoreCorruptError as e:
            logger.warning("%s - ignoring it until the next save", e)
            return Store()

    def save(self, store: Store) -> None:
        """Overwrite the store file with the given store.

        Args:
            store: Store to persist

        Raises:
            OSError: If the file cannot be written
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(
            store.model_dump(mode="json", by_alias=True),
            indent=2,
            ensure_ascii=False,
        )

        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            dir=self.path.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload + "\n")
            os.replace(tmp_path, self.path)
        except OSError:
            Path(tmp_path).unlink(missing_ok=True)
            raise

        logger.debug("Saved identity store to %s", self.path)
