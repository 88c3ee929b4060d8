"""
Service layer: dataset loading lifecycle.
"""

from .dataset_service import EventDatasetService, LoadResult, LoadStatus

__all__ = ["EventDatasetService", "LoadResult", "LoadStatus"]
