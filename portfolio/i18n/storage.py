"""Durable key/value storage for user preferences."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import streamlit as st

logger = logging.getLogger(__name__)

class PreferenceStore(ABC):
    """Interface for a flat string key/value preference store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

class JsonPreferenceStore(PreferenceStore):
    """Preferences persisted as a flat JSON object on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        """Load stored preferences, treating unreadable files as empty."""
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except Exception as e:
            logger.warning(f"Could not read preferences from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed preferences file {self.path}")
            return {}
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except Exception as e:
            logger.error(f"Failed to save preferences to {self.path}: {e}")

class MemoryPreferenceStore(PreferenceStore):
    """In-memory store. Keeps a log of writes."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})
        self.writes: List[Tuple[str, str]] = []

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
        self.writes.append((key, value))

class QueryParamPreferenceStore(PreferenceStore):
    """Preferences kept in the page URL's query string.

    Each visitor carries their own choice (and bookmarks or shared links keep
    it), unlike ``JsonPreferenceStore`` which is shared by every session of
    the server process.
    """

    def get(self, key: str) -> Optional[str]:
        return st.query_params.get(key)

    def set(self, key: str, value: str) -> None:
        if st.query_params.get(key) != value:
            st.query_params[key] = value
