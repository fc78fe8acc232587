"""Locale-aware resource bundles and template formatting."""

from .core.errors import (
    LocaleContextError,
    LocaleError,
    MalformedResourceError,
    ReadOnlyLocaleError,
    ResourceNotFoundError,
)
from .core.formatter import TemplateFormatter, format_template
from .core.i18n import LONG_MAP, Locale, extract_locale_code, locale, long_iso
from .infra.context import RequestContext, context_scope
from .infra.resources import BundleDescriptor, BundleKey, ResourceCache, ResourceLoader

__all__ = [
    "BundleDescriptor",
    "BundleKey",
    "LONG_MAP",
    "Locale",
    "LocaleContextError",
    "LocaleError",
    "MalformedResourceError",
    "ReadOnlyLocaleError",
    "RequestContext",
    "ResourceCache",
    "ResourceLoader",
    "ResourceNotFoundError",
    "TemplateFormatter",
    "context_scope",
    "extract_locale_code",
    "format_template",
    "locale",
    "long_iso",
]
