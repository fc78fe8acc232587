from __future__ import annotations


class LocaleError(Exception):
    """Base class for every error raised by localekit."""


class LocaleContextError(LocaleError):
    pass


class MalformedResourceError(LocaleError, ValueError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"malformed resource file {path}: {reason}")
        self.path = path


class ResourceNotFoundError(LocaleError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"resource {self.key} not found"


class ReadOnlyLocaleError(LocaleError, AttributeError):
    pass
