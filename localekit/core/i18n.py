from __future__ import annotations

import inspect
import json
import logging
import re
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from ..infra.context import get_context
from ..infra.resources import BundleDescriptor, LocaleSource, ResourceLoader, Resources
from .config import settings
from .errors import LocaleContextError, ReadOnlyLocaleError, ResourceNotFoundError
from .formatter import TemplateFormatter


log = logging.getLogger(__name__)

LocalizeHook = Callable[[str], Union[Awaitable[None], None]]
Bundle = Union[BundleDescriptor, str]

LONG_MAP: Dict[str, str] = {
    "ar": "ar-sa",  # Arabic (Saudi Arabia)
    "cz": "cz-cz",
    "de": "de-de",
    "en": "en-us",
    "es": "es-es",
    "fr": "fr-fr",
    "it": "it-it",
    "pl": "pl-pl",
    "pt": "pt-pt",
    "ru": "ru-ru",
    "zh": "zh-cn",  # Simplified
}

_LONG_RE = re.compile(r"\w\w-\w\w", re.IGNORECASE)


def extract_locale_code(accept_language: Optional[str]) -> str:
    """Best guess locale from an Accept-Language header.

    Only the first entry is considered; a region-qualified tag among its
    ``;`` parts wins over the bare language.
    """
    parts = (accept_language or "").split(",")[0].split(";")
    res = parts[0]
    for part in parts:
        if "-" in part:
            res = part
    return res


def long_iso(code: Optional[str]) -> Optional[str]:
    if code and _LONG_RE.search(code):
        return code.lower()
    return LONG_MAP.get(code.lower()) if code else None


def _as_bundle(bundle: Bundle) -> BundleDescriptor:
    return bundle if isinstance(bundle, BundleDescriptor) else BundleDescriptor(str(bundle))


class Locale:
    """Locale state of the running request plus resource/format helpers.

    ``current``, ``is_rtl`` and ``preferences`` are read-only; change the
    locale with :meth:`set_current`.
    """

    _READONLY = frozenset({"current", "is_rtl", "preferences"})

    def __init__(
        self,
        loader: Optional[ResourceLoader] = None,
        formatter: Optional[TemplateFormatter] = None,
        default_locale: Optional[str] = None,
    ) -> None:
        self.loader = loader or ResourceLoader()
        self.formatter = formatter or TemplateFormatter()
        self.default_locale = default_locale or settings.DEFAULT_LOCALE
        self._localize_hook: Optional[LocalizeHook] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._READONLY:
            raise ReadOnlyLocaleError(
                f"locale.{name} is readonly. Use locale.set_current(value) to change the locale."
            )
        super().__setattr__(name, value)

    @property
    def current(self) -> str:
        ctx = get_context()
        return (ctx and ctx.locale) or self.default_locale

    @property
    def is_rtl(self) -> bool:
        return self.current[:2].lower() in settings.RTL_LANGS

    @property
    def preferences(self) -> Any:
        ctx = get_context()
        return ctx.locale_preferences if ctx else None

    def register_localize_hook(self, hook: Optional[LocalizeHook]) -> None:
        """Install the callback run after every locale switch (None removes it)."""
        self._localize_hook = hook

    async def set_current(self, value: str, preferences: Any = None) -> None:
        ctx = get_context()
        if ctx is None:
            raise LocaleContextError("cannot call locale.set_current without a request context")
        ctx.locale = value
        ctx.locale_preferences = preferences
        log.info("Locale switched to %s", value)
        if self._localize_hook is None:
            return
        result = self._localize_hook(value)
        if inspect.isawaitable(result):
            await result

    def resources(self, bundle: Bundle, locale: Optional[str] = None) -> Callable[[], Resources]:
        """Return a loader for ``bundle``; call it to get the resources.

        Without ``locale`` the loader follows the current locale at call time.
        """
        source: LocaleSource = locale if locale else (lambda: self.current)
        return self.loader.accessor(_as_bundle(bundle), source)

    def format(self, source: Union[BundleDescriptor, str], *args: Any) -> str:
        if isinstance(source, str):
            return self.formatter.format(source, args)
        key, rest = args[0], args[1:]
        return self.formatter.format(self._lookup(source, key, None), rest)

    def format_locale(self, loc: Optional[str], source: Union[BundleDescriptor, str], *args: Any) -> str:
        if isinstance(source, str):
            return self.formatter.format(source, args)
        key, rest = args[0], args[1:]
        return self.formatter.format(self._lookup(source, key, loc), rest)

    def format_all_iso(self, bundle: Bundle, key: str) -> Dict[str, str]:
        """Render ``key`` once per known language, keyed by long ISO code.

        Languages whose text equals the current-locale text are left out,
        English is always kept.
        """
        result = {"default": self.formatter.format(self._lookup(bundle, key, self.current))}
        for lang, long_code in LONG_MAP.items():
            text = self.formatter.format(self._lookup(bundle, key, lang))
            if lang == "en" or text != result["default"]:
                result[long_code] = text
        return result

    def get_resources_hook(self, source_path: str, accept: Optional[str] = None) -> str:
        """JSON resources of ``source_path`` for a client asking with ``accept``."""
        tag = (accept or "en-US").split(",")[0]
        if len(tag) > 3:
            tag = tag[:3] + tag[3:].upper()
        return json.dumps(dict(self.resources(BundleDescriptor(source_path), tag)()), ensure_ascii=False)

    def _lookup(self, bundle: Bundle, key: str, loc: Optional[str]) -> str:
        fmt = self.resources(bundle, loc)().get(key)
        if fmt is None:
            raise ResourceNotFoundError(key)
        return fmt


locale = Locale()
