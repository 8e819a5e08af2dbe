"""
SQL identifier checks for names that are sent to the database verbatim.

Stored procedure names cannot be bound as parameters, so they are validated
before a command is built from them.
"""

import re

from extkit.exceptions import InvalidArgumentError


class SQLIdentifierValidator:
    """Validator for SQL identifiers to prevent injection."""

    # Valid SQL identifier pattern: letters, numbers, underscores, no special chars
    VALID_IDENTIFIER_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

    INJECTION_PATTERNS = (";", "--", "/*", "*/", "'", '"', "\\", "(", ")")

    # Only flagged when the identifier IS the keyword, not when it contains it
    DANGEROUS_KEYWORDS = {
        "DROP",
        "DELETE",
        "INSERT",
        "UPDATE",
        "ALTER",
        "CREATE",
        "TRUNCATE",
        "GRANT",
        "REVOKE",
        "COMMIT",
        "ROLLBACK",
        "EXEC",
        "EXECUTE",
    }

    @classmethod
    def is_valid_identifier(cls, identifier: str) -> bool:
        """
        Check if a single identifier is valid and safe to use in SQL.

        Args:
            identifier: The identifier to validate

        Returns:
            True if the identifier is safe, False otherwise
        """
        if not identifier or not isinstance(identifier, str):
            return False

        if any(pattern in identifier for pattern in cls.INJECTION_PATTERNS):
            return False

        if identifier.upper() in cls.DANGEROUS_KEYWORDS:
            return False

        return bool(cls.VALID_IDENTIFIER_PATTERN.match(identifier))

    @classmethod
    def is_valid_qualified_name(cls, name: str) -> bool:
        """Check a dotted name such as ``schema.procedure``."""
        if not name or not isinstance(name, str):
            return False

        return all(cls.is_valid_identifier(part) for part in name.split("."))


def validate_qualified_name(name: str) -> None:
    """
    Validate an optionally schema-qualified SQL name.

    Raises:
        InvalidArgumentError: If any part of the name is invalid
    """
    if not SQLIdentifierValidator.is_valid_qualified_name(name):
        raise InvalidArgumentError("name", f"Invalid SQL identifier: {name}")
