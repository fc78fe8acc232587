from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict

import pytest

from localekit import BundleDescriptor, Locale, ResourceLoader


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    return tmp_path / "views"


@pytest.fixture
def write_resource(bundle_dir: Path) -> Callable[[str, object], Path]:
    """Write ``views/resources/home-<tag>.json`` (raw text when given a str)."""
    resources = bundle_dir / "resources"

    def _write(tag: str, content: object) -> Path:
        resources.mkdir(parents=True, exist_ok=True)
        path = resources / f"home-{tag}.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def bundle(bundle_dir: Path) -> BundleDescriptor:
    bundle_dir.mkdir(parents=True, exist_ok=True)
    source = bundle_dir / "home.py"
    source.write_text("", encoding="utf-8")
    return BundleDescriptor(str(source))


@pytest.fixture
def loader() -> ResourceLoader:
    return ResourceLoader()


@pytest.fixture
def loc(loader: ResourceLoader) -> Locale:
    return Locale(loader=loader, default_locale="en-US")


@pytest.fixture
def sample_resources(write_resource) -> Dict[str, Path]:
    return {
        "en": write_resource("en", {"greeting": "Hello {0}", "items": "{0?no items|one item|many items}", "bye": "Bye"}),
        "fr": write_resource("fr", {"greeting": "Bonjour {0}", "items": "{0?aucun|un|plusieurs}"}),
        "fr-CA": write_resource("fr-CA", {"greeting": "Allo {0}"}),
    }
