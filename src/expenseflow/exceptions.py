"""ExpenseFlow exception hierarchy.

Errors raised here stay inside the package: the agent client and the upload
adapter convert them into result objects before they reach a flow.
"""


class ExpenseFlowError(Exception):
    """Base exception for all ExpenseFlow errors."""
    pass


class ConfigurationError(ExpenseFlowError):
    """Raised when configuration is invalid or missing required settings.

    Attributes:
        setting: Name of the setting that is invalid/missing
        message: Detailed error message
    """
    def __init__(self, setting: str, message: str | None = None):
        self.setting = setting
        self.message = message or f"Invalid or missing configuration for '{setting}'"
        super().__init__(self.message)


class AgentResponseError(ExpenseFlowError):
    """Raised when the agent service answers with something that is not a usable envelope.

    Attributes:
        status_code: HTTP status of the response
        message: Detailed error message
    """
    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        self.message = message or f"Agent request failed with HTTP {status_code}"
        super().__init__(self.message)
