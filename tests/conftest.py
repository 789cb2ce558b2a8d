"""
Shared fixtures for the compsearch tests.
"""

import json
import pytest

from compsearch.buffer.buffer_manager import ComponentRegistry
from compsearch.core.config import Settings


REGISTRY_DATA = {
    "Mixer": {
        "code": "-- mixer\nlocal gain = 3\nprint(gain)\n",
        "label": "Main gain",
        "level": 0.5,
    },
    "Router": {
        "code": "function route(x)\n  return x\nend",
        "mode": True,
    },
    "Logger": {
        "label": "print only",
        "enabled": False,
    },
}


@pytest.fixture
def registry_data():
    return json.loads(json.dumps(REGISTRY_DATA))


@pytest.fixture
def registry(registry_data) -> ComponentRegistry:
    return ComponentRegistry.from_dict(registry_data)


@pytest.fixture
def registry_file(tmp_path, registry_data):
    """Write the sample registry to a JSON file and return its path."""
    path = tmp_path / "components.json"
    path.write_text(json.dumps(registry_data), encoding="utf-8")
    return path


@pytest.fixture
def registry_dir(tmp_path):
    """Create a directory registry: one folder per component, one file per control."""
    root = tmp_path / "components"
    (root / "Mixer").mkdir(parents=True)
    (root / "Mixer" / "code.lua").write_text("print('mixer')\n", encoding="utf-8")
    (root / "Mixer" / "notes.txt").write_text("gain staging", encoding="utf-8")
    (root / "Mixer" / ".hidden").write_text("print", encoding="utf-8")
    (root / "Amp").mkdir()
    (root / "Amp" / "code.lua").write_text("local x = 1", encoding="utf-8")
    (root / "stray.txt").write_text("not a component", encoding="utf-8")
    return root


@pytest.fixture
def default_settings() -> Settings:
    """Settings with defaults only, ignoring the environment's .env file."""
    return Settings(_env_file=None)
