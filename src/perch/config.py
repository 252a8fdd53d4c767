"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(port=3000, warn_on_shadowed_routes=False)
    """

    # Default not-found response ({"error": not_found_message})
    not_found_message: str = "404 - not found"

    # Headers set by Router.json() while headers are still open
    cors_origin: str = "*"
    json_content_type: str = "application/json"

    # Content type adapters send when a handler set none
    default_content_type: str = "text/html; charset=utf-8"

    # Log a warning when a new route can never be reached
    warn_on_shadowed_routes: bool = True

    # Development server (``perch serve``)
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"
