"""Attribute criteria configuration and YAML loading."""

from filtermatch.rules.schemas import AttributeSpec, MatchProperties
from filtermatch.rules.loader import CriteriaLoader

__all__ = [
    "AttributeSpec",
    "MatchProperties",
    "CriteriaLoader",
]
