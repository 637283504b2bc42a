"""Resource kinds exposed by the catalog.

Shared by the service, the HTTP layer and the CLI so the three agree on which
collections exist and how they are named in messages.
"""

from __future__ import annotations

from enum import Enum


class ResourceKind(str, Enum):
    """Paged collections of the upstream catalog."""

    CHARACTERS = "characters"
    COMBAT_STYLES = "combat-styles"

    def label(self) -> str:
        """Human readable plural used in user-facing messages."""

        return "combat styles" if self is ResourceKind.COMBAT_STYLES else "characters"
