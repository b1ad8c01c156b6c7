"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Batch settings
DEFAULT_EXTENSIONS = [".css"]

# Output settings
DEFAULT_INDENT = "  "

# Fingerprint settings
DEFAULT_HASH_FINGERPRINTS = True

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "extensions": list(DEFAULT_EXTENSIONS),
        "indent": DEFAULT_INDENT,
        "hash_fingerprints": DEFAULT_HASH_FINGERPRINTS,
        "log_level": DEFAULT_LOG_LEVEL,
    }
