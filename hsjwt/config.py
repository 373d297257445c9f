# hsjwt/config.py
"""
Centralized configuration for the hsjwt command line tool.

Values are read from environment variables with sensible defaults. The library
functions (encode/decode) never read these; callers always pass the algorithm
and secret explicitly.

Environment Variables:
    HSJWT_ALGORITHM: Default signing algorithm (default: HS256)
    HSJWT_SECRET: Secret used when --secret is not given (default: unset)
    HSJWT_LOG_LEVEL: Log level when --verbose is not given (default: WARNING)
"""

import os
from typing import Final, Optional

from hsjwt.algorithms import Algorithm

# =============================================================================
# Signing Configuration
# =============================================================================

DEFAULT_ALGORITHM: Final[str] = os.getenv("HSJWT_ALGORITHM", "HS256")

# Never printed or logged
SECRET: Final[Optional[str]] = os.getenv("HSJWT_SECRET")

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL: Final[str] = os.getenv("HSJWT_LOG_LEVEL", "WARNING")

# =============================================================================
# Helper Functions
# =============================================================================


def get_default_algorithm() -> Algorithm:
    """
    Parse the configured default algorithm.

    Raises:
        ValueError: If HSJWT_ALGORITHM names an unsupported algorithm.
    """
    return Algorithm.from_name(DEFAULT_ALGORITHM)


def get_secret(override: Optional[str] = None) -> Optional[str]:
    """Return the secret given on the command line, falling back to HSJWT_SECRET."""
    return override if override else SECRET


def print_config() -> None:
    """Print current configuration (useful for debugging)."""
    print("hsjwt Configuration:")
    print(f"  ALGORITHM: {DEFAULT_ALGORITHM}")
    print(f"  SECRET:    {'<set>' if SECRET else '<unset>'}")
    print(f"  LOG_LEVEL: {LOG_LEVEL}")


if __name__ == "__main__":
    print_config()
