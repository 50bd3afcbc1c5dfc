"""Domain exceptions for match browsing."""


class NotFoundError(Exception):
    """Raised when no row matches a search expression."""

    def __init__(self, expression: str):
        """
        Initialize the error.

        Args:
            expression: The search expression that matched nothing
        """
        self.expression = expression
        super().__init__(f"No match for '{expression}'")
