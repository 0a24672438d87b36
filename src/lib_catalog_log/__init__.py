"""Public package surface for catalogued, leveled diagnostics.

A facility turns a message name from a flat-text catalog into a rendered sink
line plus a :class:`Message` that passes through context, facility and
process-wide hooks. See ``DESIGN.md`` for the module map.
"""

from __future__ import annotations

from .application.arguments import encode_log_value
from .application.catalog import Catalog, CatalogEntry
from .application.facility import Facility
from .application.hooks import clear_global_hook, get_global_hook, set_global_hook
from .application.ports import Logger, Sink
from .adapters.sinks.default import LoggingSink, MemorySink, StreamSink
from .core import facility_from_env, load_catalog, new_facility, read_settings
from .domain.errors import (
    ArityMismatch,
    CatalogConfigError,
    InvalidCode,
    InvalidDataTail,
    MalformedRecord,
    MessageNotFound,
    TemplateError,
)
from .domain.levels import ALL_LEVELS, Level
from .domain.message import Hook, Message
from .domain.rich_error import RichError, iter_causes, rich
from .domain.scope import Scope, catch, caught_hook, current_scope, use_scope
from .observability import get_logger

__all__ = [
    "ALL_LEVELS",
    "ArityMismatch",
    "Catalog",
    "CatalogConfigError",
    "CatalogEntry",
    "Facility",
    "Hook",
    "InvalidCode",
    "InvalidDataTail",
    "Level",
    "Logger",
    "LoggingSink",
    "MalformedRecord",
    "MemorySink",
    "Message",
    "MessageNotFound",
    "RichError",
    "Scope",
    "Sink",
    "StreamSink",
    "TemplateError",
    "catch",
    "caught_hook",
    "clear_global_hook",
    "current_scope",
    "encode_log_value",
    "facility_from_env",
    "get_global_hook",
    "get_logger",
    "iter_causes",
    "load_catalog",
    "new_facility",
    "read_settings",
    "rich",
    "set_global_hook",
    "use_scope",
]
