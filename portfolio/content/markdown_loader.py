"""Loading of blog post bodies from markdown files."""

import logging
import re
from pathlib import Path
from ..config.paths import BLOGS_DIR

logger = logging.getLogger(__name__)

FALLBACK_BODY = "# Blog post content not found\n\nThis blog post is coming soon!"
SAFE_SLUG = re.compile(r"^[a-z0-9][a-z0-9-]*$")
WORDS_PER_MINUTE = 200

def load_post_body(slug: str, directory: Path = BLOGS_DIR) -> str:
    """Read ``<slug>.md``; return a placeholder body if it cannot be read."""
    if not slug or not SAFE_SLUG.match(slug):
        logger.warning(f"Rejected blog slug: {slug!r}")
        return FALLBACK_BODY

    path = Path(directory) / f"{slug}.md"
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info(f"No markdown body for post '{slug}'")
        return FALLBACK_BODY
    except Exception as e:
        logger.error(f"Failed to read {path}: {e}")
        return FALLBACK_BODY

def estimate_read_time(text: str) -> int:
    """Reading time in whole minutes, at least one."""
    words = len((text or "").split())
    return max(1, round(words / WORDS_PER_MINUTE))
