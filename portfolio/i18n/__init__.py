"""Internationalization: locales, catalogs, locale state and translation."""

from .errors import TranslationContextError
from .locales import Locale, SUPPORTED_LOCALES, DEFAULT_LOCALE, REFERENCE_LOCALE, get_locale, list_locales
from .state import LocaleState
from .translator import Translator
from .context import TranslationContext, provide_translation, use_translation, teardown_translation
