"""Path configuration for the portfolio application."""

from datetime import datetime
from pathlib import Path

def ensure_dir(p: Path):
    """Ensure directory exists, handling conflicts by renaming existing files."""
    if p.exists() and not p.is_dir():
        backup = p.with_name(f"{p.name}.conflict.{datetime.now().strftime('%Y%m%d%H%M%S')}")
        p.rename(backup)
    p.mkdir(parents=True, exist_ok=True)

# Package directories (shipped with the code)
PACKAGE_DIR = Path(__file__).resolve().parent.parent
LOCALES_DIR = PACKAGE_DIR / "i18n" / "locales"
BLOGS_DIR = PACKAGE_DIR / "content" / "blogs"

# Runtime directories
APP_DIR = Path.cwd()
ASSETS = APP_DIR / "assets"
ensure_dir(ASSETS)

LOGS_DIR = ASSETS / "logs"
ensure_dir(LOGS_DIR)

IMAGES_DIR = ASSETS / "images"

# Key files
PREFERENCES_FILE = ASSETS / "preferences.json"

# Logo candidates
LOGO_CANDIDATES = [
    ASSETS / "logo.png",
    IMAGES_DIR / "logo.png",
    Path("logo.png"),
]
