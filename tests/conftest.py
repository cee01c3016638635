from __future__ import annotations

import importlib.util
import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure():
    os.environ.setdefault("PYVISTA_OFF_SCREEN", "true")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def _load_example(path: Path):
    """Import an example module from disk and return its build() result."""
    module_name = f"regpoly_example_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module.build()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> Path:
    config_dir = tmp_path / "config"
    monkeypatch.setenv("REGPOLY_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def load_example():
    return _load_example
