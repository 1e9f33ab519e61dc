"""File handling utilities."""

import base64
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

class FileUtils:
    """Utilities for file operations."""

    @staticmethod
    def load_logo_bytes(logo_candidates: list) -> Optional[bytes]:
        """Load logo bytes from the first available candidate path."""
        for path in logo_candidates:
            if isinstance(path, str):
                path = Path(path)
            if path.exists():
                try:
                    return path.read_bytes()
                except Exception as e:
                    logger.warning(f"Could not read logo {path}: {e}")
                    continue
        return None

    @staticmethod
    def create_logo_tag(logo_bytes: Optional[bytes], height: int = 40, alt: str = "Logo") -> str:
        """Create an HTML img tag for the logo."""
        if not logo_bytes:
            return ""

        b64 = base64.b64encode(logo_bytes).decode()
        return f"<img src='data:image/png;base64,{b64}' alt='{alt}' style='height:{height}px'/>"
