from .base_view import BaseView
from .event_detail_view import EventDetailView

__all__ = ["BaseView", "EventDetailView"]
