# -*- coding: utf-8 -*-
"""
Draft repository for in-progress wizard runs.

One JSON file per persist key under ``Config.DRAFTS_DIR``:

    {"persist_key": "...", "saved_at": "2024-01-15T10:30:00", "state": {...}}

where ``state`` is a WizardState.to_dict() snapshot.
"""

import json
import os
import re
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from app.config import Config
from services.exceptions import DraftStorageError
from utils.datetime_utils import json_default
from utils.logger import get_logger

logger = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class DraftRepository:
    """Repository for wizard draft snapshots stored as JSON files."""

    def __init__(self, drafts_dir: Optional[Union[str, Path]] = None):
        self.drafts_dir = Path(drafts_dir) if drafts_dir else Config.DRAFTS_DIR

    def _path_for(self, persist_key: str) -> Path:
        if not persist_key or not isinstance(persist_key, str):
            raise DraftStorageError("Draft key must be a non-empty string", persist_key)
        safe_name = _UNSAFE_CHARS.sub("_", persist_key)
        return self.drafts_dir / f"{safe_name}{Config.DRAFT_FILE_SUFFIX}"

    def save(self, persist_key: str, state: Dict[str, Any]) -> Path:
        """
        Save (or overwrite) the draft for a persist key.

        The file is written to a temporary sibling first and moved into
        place, so a crash never leaves a half-written draft behind.

        Args:
            persist_key: Key identifying the wizard run
            state: Serializable wizard state snapshot

        Returns:
            Path of the written draft file

        Raises:
            DraftStorageError: if the snapshot cannot be serialized or written
        """
        path = self._path_for(persist_key)
        envelope = {
            "persist_key": persist_key,
            "saved_at": datetime.now().isoformat(timespec="seconds"),
            "state": state,
        }

        try:
            payload = json.dumps(envelope, ensure_ascii=False, indent=2, default=json_default)
            self.drafts_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=str(self.drafts_dir), suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise DraftStorageError(f"Could not save draft: {e}", persist_key, e) from e

        logger.debug(f"Saved draft: {persist_key}")
        return path

    def load(self, persist_key: str) -> Optional[Dict[str, Any]]:
        """
        Load the state snapshot for a persist key.

        Returns:
            The snapshot dictionary, or None when no draft exists

        Raises:
            DraftStorageError: if the draft exists but is unreadable or malformed
        """
        path = self._path_for(persist_key)
        if not path.exists():
            return None

        try:
            with path.open("r", encoding="utf-8") as handle:
                envelope = json.load(handle)
        except (OSError, ValueError) as e:
            raise DraftStorageError(f"Could not read draft: {e}", persist_key, e) from e

        if not isinstance(envelope, dict) or not isinstance(envelope.get("state"), dict):
            raise DraftStorageError("Draft file has no state", persist_key)

        logger.debug(f"Loaded draft: {persist_key} (saved {envelope.get('saved_at')})")
        return envelope["state"]

    def exists(self, persist_key: str) -> bool:
        return self._path_for(persist_key).exists()

    def delete(self, persist_key: str) -> bool:
        """
        Delete the draft for a persist key.

        Returns:
            True if a draft was removed
        """
        path = self._path_for(persist_key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise DraftStorageError(f"Could not delete draft: {e}", persist_key, e) from e

        logger.debug(f"Deleted draft: {persist_key}")
        return True

    def list_keys(self) -> List[str]:
        """Persist keys of all stored drafts, sorted."""
        if not self.drafts_dir.exists():
            return []

        keys = []
        for path in self.drafts_dir.glob(f"*{Config.DRAFT_FILE_SUFFIX}"):
            try:
                with path.open("r", encoding="utf-8") as handle:
                    keys.append(json.load(handle)["persist_key"])
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.warning(f"Skipping unreadable draft file {path.name}: {e}")
        return sorted(keys)
