"""Global pytest fixtures and configuration.

This module provides shared fixtures for all tests including:
- A clean ``SPRING_CACHE_*`` environment for every test
- Reset of the process-wide property sources and cache properties
- Configuration files for resource resolution tests
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import pytest

from cache_properties.config import get_property_sources, reset_cache_properties

ENV_PREFIX = "SPRING_CACHE_"


def _clear_cache_env() -> None:
    for key in [k for k in os.environ if k.startswith(ENV_PREFIX)]:
        del os.environ[key]


@pytest.fixture(autouse=True)
def clean_cache_config() -> Iterator[None]:
    """Ensure no cache configuration leaks between tests."""
    _clear_cache_env()
    get_property_sources().clear()
    reset_cache_properties()
    yield
    _clear_cache_env()
    get_property_sources().clear()
    reset_cache_properties()


@pytest.fixture
def ehcache_xml(tmp_path: Path) -> Path:
    """Create an EhCache configuration file.

    Returns:
        Path to the created file
    """
    path = tmp_path / "ehcache.xml"
    path.write_text('<ehcache><cache name="users" maxEntriesLocalHeap="100"/></ehcache>')
    return path


@pytest.fixture
def missing_xml(tmp_path: Path) -> Path:
    """Path to a configuration file that does not exist."""
    return tmp_path / "does-not-exist.xml"
