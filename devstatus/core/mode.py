"""Runtime mode resolution."""

from enum import Enum

PRODUCTION_SIGNAL = "production"


class RuntimeMode(str, Enum):
    """Two-valued runtime classification driving all mode-gated output."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"

    @property
    def label(self) -> str:
        """Human-readable mode label."""
        return self.value.capitalize()


def resolve_mode(value: str | None) -> RuntimeMode:
    """Classify an environment signal into a runtime mode.

    Only the exact, case-sensitive literal ``"production"`` selects
    production. Anything else, including ``None`` and the empty string,
    selects development.
    """
    if value == PRODUCTION_SIGNAL:
        return RuntimeMode.PRODUCTION
    return RuntimeMode.DEVELOPMENT
