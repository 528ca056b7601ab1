"""YAML criteria loader.

A criteria file holds one match-properties block or a list of them:

    - name: server_errors
      match_type: strict
      attributes:
        - key: http.status_code
          value: 500
        - key: error
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from filtermatch.compiler.ir import CompiledMatcher
from filtermatch.core.config import get_settings
from filtermatch.core.errors import CriteriaConfigError
from filtermatch.rules.schemas import MatchProperties

logger = logging.getLogger(__name__)


class CriteriaLoader:
    """Loads and validates named criteria blocks from YAML files or directories."""

    def __init__(self, criteria_dir: str | Path | None = None):
        if not criteria_dir:
            try:
                criteria_dir = get_settings().criteria_dir
            except ValidationError as e:
                raise CriteriaConfigError(f"Invalid filtermatch settings: {e}") from e
        self.criteria_dir = Path(criteria_dir)
        self._blocks: dict[str, MatchProperties] = {}

    def load_file(self, path: str | Path) -> list[MatchProperties]:
        """Load criteria blocks from a single YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Criteria file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                content = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise CriteriaConfigError(f"Invalid YAML in {path}: {e}") from e

        if content is None:
            return []

        # Handle single block or list of blocks
        items = content if isinstance(content, list) else [content]
        blocks = [self._parse_block(item, path) for item in items]
        for block in blocks:
            if block.name in self._blocks:
                logger.warning(f"Criteria block {block.name!r} redefined in {path}")
            self._blocks[block.name] = block

        logger.info(f"Loaded {len(blocks)} criteria block(s) from {path}")
        return blocks

    def load_directory(self, path: str | Path | None = None) -> list[MatchProperties]:
        """Load all YAML criteria files from a directory, in name order."""
        path = Path(path) if path else self.criteria_dir
        if not path.exists():
            raise FileNotFoundError(f"Criteria directory not found: {path}")

        blocks = []
        files = sorted([*path.glob("*.yaml"), *path.glob("*.yml")])
        for yaml_file in files:
            blocks.extend(self.load_file(yaml_file))
        return blocks

    def get(self, name: str) -> MatchProperties | None:
        """Get a loaded block by name."""
        return self._blocks.get(name)

    def get_all(self) -> list[MatchProperties]:
        """Get all loaded blocks."""
        return list(self._blocks.values())

    def compile(self, name: str) -> CompiledMatcher:
        """Compile a loaded block into a matcher."""
        block = self.get(name)
        if block is None:
            raise CriteriaConfigError(f"Criteria block not found: {name}")
        return block.compile()

    def compile_all(self) -> dict[str, CompiledMatcher]:
        """Compile every loaded block, failing on the first invalid one."""
        return {name: block.compile() for name, block in self._blocks.items()}

    def _parse_block(self, data: Any, path: Path) -> MatchProperties:
        """Parse a block from dictionary data."""
        if not isinstance(data, dict):
            raise CriteriaConfigError(f"Criteria block in {path} must be a mapping")
        if not data.get("name"):
            raise CriteriaConfigError(f"Criteria block in {path} is missing a name")
        try:
            return MatchProperties.model_validate(data)
        except ValidationError as e:
            raise CriteriaConfigError(f"Invalid criteria block {data['name']!r} in {path}: {e}") from e
