"""Loading and inspection of the bundled translation catalogs."""

import json
import logging
import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Set, Tuple

import streamlit as st

from ..config.paths import LOCALES_DIR
from .locales import REFERENCE_LOCALE, is_supported

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")

def load_catalogs(directory: Path = LOCALES_DIR) -> Dict[str, dict]:
    """
    Load every ``<code>.json`` catalog for a registered locale.

    Files for unregistered codes are ignored. A file that cannot be read or
    parsed is logged and skipped; lookups for that locale then fall back to
    the reference catalog.

    Returns:
        Mapping of locale code to its nested key tree.
    """
    catalogs: Dict[str, dict] = {}
    for path in sorted(Path(directory).glob("*.json")):
        code = path.stem
        if not is_supported(code):
            logger.debug(f"Skipping catalog for unregistered locale: {path.name}")
            continue
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except Exception as e:
            logger.error(f"Failed to load catalog {path}: {e}")
            continue
        if not isinstance(data, dict):
            logger.error(f"Catalog {path} is not a JSON object")
            continue
        catalogs[code] = data

    logger.info(f"Loaded translation catalogs: {sorted(catalogs)}")
    return catalogs

@st.cache_resource(show_spinner=False)
def _load_catalogs_cached(directory: str, signature: Tuple[Tuple[str, float], ...]) -> Dict[str, dict]:
    """Load catalogs once per directory state, shared by all sessions."""
    return load_catalogs(Path(directory))

def cached_catalogs(directory: Path = LOCALES_DIR) -> Dict[str, dict]:
    """
    Catalogs from the process-wide cache.

    The cache key includes each file's modification time, so an edited
    catalog is picked up by the next session. Callers must not mutate the
    returned trees.
    """
    signature = tuple(
        (path.name, path.stat().st_mtime) for path in sorted(Path(directory).glob("*.json"))
    )
    return _load_catalogs_cached(str(directory), signature)

def flatten(tree: Mapping[str, Any], prefix: str = "") -> Dict[str, Any]:
    """
    Index every node of a nested catalog by its dotted path.

    Intermediate mappings are indexed too, so "contact.form" resolves to the
    whole form sub-tree while "contact.form.send" resolves to the leaf.
    """
    flat: Dict[str, Any] = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat[path] = MappingProxyType(dict(value))
            flat.update(flatten(value, path))
        else:
            flat[path] = value
    return flat

def leaf_keys(tree: Mapping[str, Any]) -> Set[str]:
    """Dotted paths of all non-mapping values in a catalog."""
    return {path for path, value in flatten(tree).items() if not isinstance(value, Mapping)}

def missing_keys(catalogs: Mapping[str, Mapping], code: str) -> List[str]:
    """Reference leaf keys that ``code``'s catalog does not define."""
    reference = leaf_keys(catalogs.get(REFERENCE_LOCALE, {}))
    present = leaf_keys(catalogs.get(code, {}))
    return sorted(reference - present)

def placeholders(text: Any) -> Set[str]:
    """Names of ``{{name}}`` placeholders in a catalog string."""
    if not isinstance(text, str):
        return set()
    return set(PLACEHOLDER_RE.findall(text))

def placeholder_mismatches(catalogs: Mapping[str, Mapping], code: str) -> List[str]:
    """Keys whose placeholders differ from the reference string."""
    reference = flatten(catalogs.get(REFERENCE_LOCALE, {}))
    translated = flatten(catalogs.get(code, {}))
    mismatches = []
    for key, value in translated.items():
        if key in reference and placeholders(value) != placeholders(reference[key]):
            mismatches.append(key)
    return sorted(mismatches)
