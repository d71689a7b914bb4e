"""Exception classes for unleashed-md.

Tokenizing, parsing and link extraction never raise: malformed markup
degrades into plain text or missing spans. These exceptions cover the
package edges only (configuration and serialization).
"""

from __future__ import annotations


class UnleashedError(Exception):
    """Base exception for all unleashed-md errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(UnleashedError, ValueError):
    """Invalid configuration value.

    Raised when a known ParseConfig field receives a value of the wrong type.
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending ParseConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"Config field '{field_name}': {message}")


class SerializationError(UnleashedError, ValueError):
    """Error while reconstructing values from serialized data.

    Raised for a missing or unknown ``_type`` discriminator, or when the
    root value is not a Document.
    """

    pass
