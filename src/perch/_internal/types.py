"""Shared type aliases used across perch modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives the extracted path parameter ("" for static routes)
Handler: TypeAlias = Callable[[str], Any]

# Hooks and the fallback handler take no arguments
Hook: TypeAlias = Callable[[], Any]
FallbackHandler: TypeAlias = Callable[[], Any]
