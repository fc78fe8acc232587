from __future__ import annotations

import json
import logging
import posixpath
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Mapping, NamedTuple, Optional, Union

from ..core.config import settings
from ..core.errors import MalformedResourceError
from .fs import FileSystem, LocalFileSystem


log = logging.getLogger(__name__)

Resources = Mapping[str, str]
LocaleSource = Union[str, Callable[[], str]]


@dataclass(frozen=True)
class BundleDescriptor:
    """Identifies a resource bundle by the file that defines it.

    Resources for ``/app/views/home.py`` live next to it, in
    ``/app/views/resources/home-<locale>.json``. A bundle built with
    ``precomputed_resources`` skips the filesystem entirely.
    """

    source_path: str
    precomputed_resources: Optional[Resources] = None


class BundleKey(NamedTuple):
    source_path: str
    locale: str


class ResourceCache:
    """Process-wide store of resolved bundles. Entries are never evicted."""

    def __init__(self) -> None:
        self._entries: Dict[BundleKey, Resources] = {}

    def get(self, key: BundleKey) -> Optional[Resources]:
        return self._entries.get(key)

    def put(self, key: BundleKey, resources: Resources) -> Resources:
        self._entries[key] = resources
        return resources

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class ResourceLoader:
    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        cache: Optional[ResourceCache] = None,
        base_lang: Optional[str] = None,
        resources_dirname: Optional[str] = None,
    ) -> None:
        self.fs = fs if fs is not None else LocalFileSystem()
        self.cache = cache if cache is not None else ResourceCache()
        self.base_lang = base_lang or settings.BASE_LANG
        self.resources_dirname = resources_dirname or settings.RESOURCES_DIRNAME

    def load(self, bundle: BundleDescriptor, locale: str) -> Resources:
        if bundle.precomputed_resources is not None:
            return bundle.precomputed_resources
        key = BundleKey(bundle.source_path, locale)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        log.debug("Resolving resources for %s (%s)", bundle.source_path, locale)
        return self.cache.put(key, MappingProxyType(self._resolve(bundle.source_path, locale)))

    def accessor(self, bundle: BundleDescriptor, locale: LocaleSource) -> Callable[[], Resources]:
        """Return a zero-argument loader bound to ``bundle``.

        ``locale`` may be a callable, in which case it is evaluated on every call.
        """
        def _resources() -> Resources:
            loc = locale() if callable(locale) else locale
            return self.load(bundle, loc)

        return _resources

    def _resolve(self, source_path: str, locale: str) -> Dict[str, str]:
        result = self._merge_file(source_path, self.base_lang, {})
        lang = locale[:2]
        if lang != self.base_lang:
            result = self._merge_file(source_path, lang, result)
        if locale != lang:
            result = self._merge_file(source_path, locale, result)
        return result

    def _merge_file(self, source_path: str, tag: str, result: Dict[str, str]) -> Dict[str, str]:
        p = source_path.replace("\\", "/")
        directory = posixpath.join(posixpath.dirname(p), self.resources_dirname)
        base = posixpath.splitext(posixpath.basename(p))[0]
        if not self.fs.exists(directory):
            return result

        path = self._find_file(directory, base, tag)
        if path is None:
            return result

        try:
            delta = json.loads(self.fs.read_text(path))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            log.error("Cannot parse resource file %s: %s", path, e)
            raise MalformedResourceError(path, str(e)) from e
        if not isinstance(delta, dict):
            log.error("Resource file %s does not hold a JSON object", path)
            raise MalformedResourceError(path, "top-level value must be an object")
        # null values behave like missing keys
        if not all(v is None or isinstance(v, str) for v in delta.values()):
            log.error("Resource file %s has non-string values", path)
            raise MalformedResourceError(path, "values must be strings")

        log.debug("Merging %d keys from %s", len(delta), path)
        result.update(delta)
        return result

    def _find_file(self, directory: str, base: str, tag: str) -> Optional[str]:
        path = posixpath.join(directory, f"{base}-{tag}.json")
        if self.fs.exists(path):
            return path
        if len(tag) != 2:
            return None
        # Fall back to a region-qualified variant, e.g. home-fr-CA.json for "fr"
        pattern = re.compile(rf"{re.escape(base)}-{re.escape(tag)}-\w+\.json", re.ASCII)
        variants = sorted(name for name in self.fs.listdir(directory) if pattern.fullmatch(name))
        if not variants:
            return None
        log.debug("No %s file for %s, using %s", tag, base, variants[0])
        return posixpath.join(directory, variants[0])
