"""Error types and the single place tool-facing error text is produced."""


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing."""


class GitBookAPIError(Exception):
    """Exception raised when the GitBook API returns a non-2xx response."""

    def __init__(self, status_code: int, status_text: str, body: str, endpoint: str):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        self.endpoint = endpoint
        super().__init__(
            f"GitBook API error {status_code} ({status_text}) on {endpoint}: {body}"
        )


def format_tool_error(error: object) -> str:
    """Render a caught error as user-facing diagnostic text.

    Args:
        error: Whatever was caught; usually an exception

    Returns:
        A three-line block for API errors, ``Error: <message>`` for other
        exceptions and ``Unknown error: <value>`` for anything else
    """
    if isinstance(error, GitBookAPIError):
        return "\n".join(
            [
                f"GitBook API Error ({error.status_code}):",
                f"Endpoint: {error.endpoint}",
                f"Message: {error.body}",
            ]
        )

    if isinstance(error, BaseException):
        return f"Error: {error}"

    return f"Unknown error: {error}"
