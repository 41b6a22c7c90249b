"""Constants and enums for neo-acl.

This module defines the constants that are used throughout the neo-acl
library.
"""

from enum import Enum
from typing import Final


class PathDefaults:
    """Defaults for permission path handling."""
    
    DELIMITER: Final[str] = "."
    MAX_ROLE_CODE_LENGTH: Final[int] = 100
    ROLE_CODE_PATTERN: Final[str] = r"^[a-zA-Z0-9_-]+$"


class EnvPrefix(str, Enum):
    """Environment variable prefixes."""
    NEO_ACL = "NEO_ACL_"
