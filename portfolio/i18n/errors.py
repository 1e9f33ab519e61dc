"""Errors raised by the i18n layer."""

class TranslationContextError(RuntimeError):
    """Raised when translations are requested before a context is provided.

    This is a wiring defect (a page rendered before ``provide_translation``
    ran), never a data problem, so it is not caught anywhere in the app.
    """
