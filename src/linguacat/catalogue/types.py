"""Type aliases for the catalogue domain.

Provides semantic type aliases used throughout linguacat and by user code
when annotating translation call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import TypeAlias

__all__ = [
    "Context",
    "ContextValue",
    "Domain",
    "MessageId",
    "Template",
]

Domain: TypeAlias = str
"""Caller-chosen namespace for message ids (e.g., 'messages', 'errors')."""

MessageId: TypeAlias = str
"""Identifier of a message within a domain (e.g., 'greeting', 'apples')."""

Template: TypeAlias = str
"""Raw message body as stored in a catalogue, possibly with plural branches."""

ContextValue: TypeAlias = str | int | float | Decimal | bool | object
"""Value substituted into a placeholder; anything else is rendered with str()."""

Context: TypeAlias = Mapping[str, ContextValue]
"""Placeholder values keyed by name; the 'count' key drives plural selection."""
