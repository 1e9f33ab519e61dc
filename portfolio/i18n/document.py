"""Document-level language attributes applied to the rendered page."""

from typing import Dict
from pydantic import BaseModel

class HostDocument(BaseModel):
    """The page's ``lang`` and ``dir`` attributes."""
    lang: str = "en"
    dir: str = "ltr"

    @property
    def is_rtl(self) -> bool:
        return self.dir == "rtl"

    def html_attributes(self) -> Dict[str, str]:
        """Attributes for the app's root container."""
        return {"lang": self.lang, "dir": self.dir}
