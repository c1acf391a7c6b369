"""
Custom exceptions for the data-structure components.
"""


class PreconditionViolation(AssertionError):
    """
    Raised when an operation is invoked outside its required state.

    This is a fail-fast error indicating a caller bug. It is raised before
    any mutation happens, so the receiving instance is left untouched.
    """

    def __init__(self, condition: str):
        """
        Initialize precondition violation.

        Args:
            condition: The violated condition, e.g. "this /= <>".
        """
        self.condition = condition
        super().__init__(f"Violation of: {condition}")
