"""Contact form model."""

import re
from urllib.parse import quote
from pydantic import BaseModel, ValidationError, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

class ContactMessage(BaseModel):
    """A message composed on the contact page and sent through the visitor's mail client."""
    name: str
    email: str
    subject: str
    message: str

    @field_validator("name", "email", "subject", "message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("required")
        return value

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError("email")
        return value

    def body(self) -> str:
        return f"Name: {self.name}\nEmail: {self.email}\n\nMessage:\n{self.message}"

    def mailto_link(self, recipient: str) -> str:
        """Build the ``mailto:`` URL with the subject and body URL-encoded."""
        return f"mailto:{recipient}?subject={quote(self.subject, safe='')}&body={quote(self.body(), safe='')}"

def validation_message_key(error: ValidationError) -> str:
    """Catalog key describing the first problem in a contact form."""
    for detail in error.errors():
        if str(detail.get("msg", "")).endswith("required"):
            return "contact.form.validation.required"
    return "contact.form.validation.email"
