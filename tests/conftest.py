"""Pytest fixtures for test suite."""

import pytest
from pathlib import Path

from filtermatch.core.attributes import AttributeMap
from filtermatch.core.config import get_settings
from filtermatch.filterset.config import FilterSetConfig, MatchType


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def strict_config() -> FilterSetConfig:
    """Filter set config for exact-value matching."""
    return FilterSetConfig(match_type=MatchType.STRICT)


@pytest.fixture
def regexp_config() -> FilterSetConfig:
    """Filter set config for pattern matching."""
    return FilterSetConfig(match_type=MatchType.REGEXP)


@pytest.fixture
def http_attributes() -> AttributeMap:
    """Attributes of a typical HTTP server span."""
    return AttributeMap.from_dict({
        "http.method": "GET",
        "http.status_code": 200,
        "http.duration": 12.5,
        "error": False,
        "net.peer.ip": b"\x7f\x00\x00\x01",
        "http.flavors": ["1.1", "2"],
        "http.headers": {"host": "example.com"},
    })


@pytest.fixture
def criteria_dir(tmp_path: Path) -> Path:
    """Directory with sample criteria files."""
    (tmp_path / "http.yaml").write_text(
        """
- name: server_errors
  match_type: strict
  attributes:
    - key: http.status_code
      value: 500
    - key: error
- name: get_requests
  match_type: regexp
  attributes:
    - key: http.method
      value: "^GET$"
""",
        encoding="utf-8",
    )
    (tmp_path / "db.yml").write_text(
        """
name: database_calls
attributes:
  - key: db.system
    value: postgresql
""",
        encoding="utf-8",
    )
    return tmp_path
