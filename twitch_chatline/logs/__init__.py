"""Project logging package.

Contains the event catalog and the structured ChatLogger. Avoid importing
stdlib logging through this package name externally.
"""

from .event_catalog import EVENT_TEMPLATES, reload_event_templates  # noqa: F401
from .logger import ChatLogger, logger  # noqa: F401

__all__ = ["ChatLogger", "logger", "EVENT_TEMPLATES", "reload_event_templates"]
