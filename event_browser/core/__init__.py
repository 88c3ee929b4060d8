"""
Core domain layer: event records, dataset loading, the filter/sort/paginate
engines and the dashboard session that keeps them consistent
"""

from .record import EventRecord
from .filter_state import FilterState
from .sort_engine import SortKey
from .session import DashboardSession, DashboardView

__all__ = ["EventRecord", "FilterState", "SortKey", "DashboardSession", "DashboardView"]
