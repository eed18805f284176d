"""Adapters for integrating ParetoKit with dataset sources."""

from .sqlalchemy_repo import SQLAlchemyDatasetRepository
from .static_repo import StaticDatasetRepository

__all__ = ["SQLAlchemyDatasetRepository", "StaticDatasetRepository"]
