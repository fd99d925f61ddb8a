"""Team authentication error types."""


class TeamAuthError(Exception):
    """Base error for team authentication configuration."""

    def __init__(self, message: str, code: str = "team_auth_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class HashingError(TeamAuthError):
    """Raised when the password hashing primitive fails."""

    def __init__(self, reason: str = "Password hashing failed"):
        super().__init__(reason, "hashing_failed")


class EncodingError(TeamAuthError):
    """Raised when a protected credential cannot be serialized."""

    def __init__(self, reason: str = "Credential encoding failed"):
        super().__init__(reason, "encoding_failed")
