"""Error codes for ghcount failures.

Error Code Convention:
    GC0xx - Unclassified failures
    GC1xx - Repository metadata errors
    GC2xx - Clone errors
    GC3xx - External line counter errors
    GC4xx - Configuration errors

The hundreds digit identifies the pipeline stage that failed, which is what
the CLI prints next to a fatal error.
"""

from enum import Enum


class ErrorCode(Enum):
    """Structured error codes, one per failure mode."""

    GC000 = "GC000"  # Unclassified

    # Metadata errors (GC1xx)
    GC100 = "GC100"  # Metadata request failed
    GC101 = "GC101"  # Token rejected (401)
    GC102 = "GC102"  # Access denied (403)
    GC103 = "GC103"  # Repository not found (404)

    # Clone errors (GC2xx)
    GC200 = "GC200"  # git clone failed
    GC201 = "GC201"  # git clone rejected the credentials

    # External line counter errors (GC3xx)
    GC300 = "GC300"  # cloc not installed
    GC301 = "GC301"  # cloc exited non-zero or printed garbage

    # Configuration errors (GC4xx)
    GC400 = "GC400"  # Config file unreadable
    GC401 = "GC401"  # Config document malformed
    GC402 = "GC402"  # Invalid configuration value

    @property
    def stage(self) -> str:
        """Human-readable name of the stage this code belongs to."""
        return _STAGES[self.value[:3]]


_STAGES = {
    "GC0": "run",
    "GC1": "metadata fetch",
    "GC2": "clone",
    "GC3": "line counter",
    "GC4": "configuration",
}
