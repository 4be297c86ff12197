class TabBrowserError(Exception):
    """Base exception for all tab_browser errors"""
    pass

class ConfigError(TabBrowserError):
    """Invalid or inconsistent global.json values"""
    pass

class InvalidAggregationError(TabBrowserError, ValueError):
    """
    Aggregation kind is not one of SUM / AVERAGE / COUNT.
    This is a caller bug, not a data condition, so it is never absorbed.
    """
    pass

class ImportFormatError(TabBrowserError):
    """
    File cannot be translated to/from rows:
    unsupported extension, JSON that is not a list of objects, etc
    """
    pass
