"""Mapping layer - transform row dicts into entities."""

from __future__ import annotations

from forum_orm.mapping.model import ModelMapper
from forum_orm.mapping.protocol import Mapper

__all__ = [
    "Mapper",
    "ModelMapper",
]
