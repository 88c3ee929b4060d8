

class EventBrowserError(Exception):
    """Base exception for all event_browser errors"""
    pass

class ConfigError(EventBrowserError):
    """Missing or invalid global.json"""
    pass

class DatasetLoadError(EventBrowserError):
    """
    Events dataset could not be read: resource unreachable, empty,
    unparseable, or missing the event_id column
    """
    pass

class UnknownFilterError(EventBrowserError, ValueError):
    """Filter field or suitability bracket the session does not know about"""
    pass

class InvalidSortKeyError(EventBrowserError, ValueError):
    """Sort identifier outside of the supported sort keys"""
    pass
