"""Translation lookup with English fallback and ``{{name}}`` interpolation."""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional

from .catalog import PLACEHOLDER_RE, flatten
from .locales import REFERENCE_LOCALE
from .state import LocaleState

logger = logging.getLogger(__name__)

class LookupResult(NamedTuple):
    """Outcome of looking a key up in one catalog."""
    found: bool
    value: Any = None

MISSING = LookupResult(found=False)

def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Replace ``{{name}}`` tokens whose name is in ``params``; keep the rest."""
    def _sub(match):
        name = match.group(1)
        return str(params[name]) if name in params else match.group(0)
    return PLACEHOLDER_RE.sub(_sub, template)

class Translator:
    """Resolves dotted key paths for the active locale of a ``LocaleState``."""

    def __init__(self, catalogs: Mapping[str, Mapping], state: LocaleState):
        self.state = state
        self._index: Dict[str, Mapping[str, Any]] = {
            code: MappingProxyType(flatten(tree)) for code, tree in catalogs.items()
        }

    def lookup(self, code: str, key_path: str) -> LookupResult:
        """Look ``key_path`` up in a single locale's catalog. Empty strings count as missing."""
        value = self._index.get(code, {}).get(key_path)
        if value is None or value == "":
            return MISSING
        return LookupResult(found=True, value=value)

    def resolve(self, key_path: str) -> LookupResult:
        """Active locale first, then the reference locale."""
        result = self.lookup(self.state.current_code, key_path)
        if result.found:
            return result
        result = self.lookup(REFERENCE_LOCALE, key_path)
        if not result.found:
            logger.debug(f"Missing translation key: {key_path}")
        return result

    def translate(self, key_path: str, params: Optional[Mapping[str, Any]] = None):
        """
        Translate a dotted key path, e.g. ``t("footer.copyright", {"year": 2024})``.

        Returns the raw key path when no catalog defines it. Sub-trees and
        lists are returned as-is and never interpolated.
        """
        result = self.resolve(key_path)
        if not result.found:
            return key_path

        value = result.value
        if isinstance(value, str) and params:
            return interpolate(value, params)
        return value

    t = translate
