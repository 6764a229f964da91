"""Services package - service class exports."""

from app.services.election import ElectionLifecycle

__all__ = [
    "ElectionLifecycle",
]
