"""Common models shared across domains."""

from app.models.common.base import BaseEntity

__all__ = ["BaseEntity"]
