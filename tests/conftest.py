"""
Pytest configuration and shared fixtures for Monoscan tests.

All fixtures use real line lists and real files in temp directories.
"""

import json
from pathlib import Path

import pytest

from monoscan.catalog import LifecycleCatalog
from monoscan.scanner import Scanner


PLAYER_SOURCE = '''using UnityEngine;

public class Player : MonoBehaviour
{
    public float speed = 5f;

    void Start()
    {
        Debug.Log("start");
    }

    void Update() { Move(); }

    void Move()
    {
        transform.Translate(Vector3.forward * speed);
    }

}
'''

PLAIN_SOURCE = '''namespace Game
{
    public class Inventory
    {
        void Add(Item item)
        {
        }
    }
}
'''

TEST_CATALOG_RECORDS = [
    {"name": "Awake", "description": "Script instance is being loaded."},
    {"name": "Start"},
    {"name": "Update", "parameters": []},
    {"name": "OnDestroy"},
]


@pytest.fixture
def catalog() -> LifecycleCatalog:
    """Small four-message catalog."""
    return LifecycleCatalog.from_records(TEST_CATALOG_RECORDS)


@pytest.fixture
def scanner(catalog: LifecycleCatalog) -> Scanner:
    """Scanner over the small test catalog."""
    return Scanner(catalog)


@pytest.fixture
def player_lines() -> list[str]:
    """A MonoBehaviour with Start, Update and a helper method."""
    return PLAYER_SOURCE.splitlines()


@pytest.fixture
def plain_lines() -> list[str]:
    """A namespaced class without a component base type."""
    return PLAIN_SOURCE.splitlines()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """The test catalog written to a JSON file."""
    path = tmp_path / "messages.json"
    path.write_text(json.dumps(TEST_CATALOG_RECORDS))
    return path


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Create a small Unity-style project tree.

    Assets/Scripts/Player.cs    - MonoBehaviour
    Assets/Scripts/Inventory.cs - plain class
    Library/Cached.cs           - must be skipped
    """
    scripts = tmp_path / "Assets" / "Scripts"
    scripts.mkdir(parents=True)
    (scripts / "Player.cs").write_text(PLAYER_SOURCE)
    (scripts / "Inventory.cs").write_text(PLAIN_SOURCE)

    library = tmp_path / "Library"
    library.mkdir()
    (library / "Cached.cs").write_text(PLAYER_SOURCE)
    return tmp_path
