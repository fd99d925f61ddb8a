"""Per-team authentication configuration.

Models which authentication mechanisms a team has configured and
enabled, and protects basic auth credentials before they are stored:
- BasicAuth, GitHubAuth, UAAAuth, GenericOAuth variant records
- AuthWrapper ordered provider registry
- Team / SavedTeam aggregate
- bcrypt-based credential protection

Usage:
    from packages.teams import Team, BasicAuth, new_auth_wrapper

    team = Team(
        name="main",
        auth_wrapper=new_auth_wrapper(["basic"]),
        basic_auth=BasicAuth(basic_auth_username="admin", basic_auth_password="s3cret"),
    )
    stored = team.to_storage_json()
"""

from packages.teams.config import TeamAuthSettings, get_settings
from packages.teams.errors import EncodingError, HashingError, TeamAuthError
from packages.teams.models import (
    AuthVariant,
    BasicAuth,
    GenericOAuth,
    GitHubAuth,
    GitHubTeam,
    SavedTeam,
    Team,
    UAAAuth,
)
from packages.teams.protector import (
    encrypted_json,
    hash_password,
    is_bcrypt_hash,
    protect_basic_auth,
)
from packages.teams.providers import AuthProvider, AuthType, AuthWrapper, new_auth_wrapper

__all__ = [
    "TeamAuthSettings",
    "get_settings",
    "TeamAuthError",
    "HashingError",
    "EncodingError",
    "AuthVariant",
    "BasicAuth",
    "GitHubTeam",
    "GitHubAuth",
    "UAAAuth",
    "GenericOAuth",
    "Team",
    "SavedTeam",
    "encrypted_json",
    "hash_password",
    "is_bcrypt_hash",
    "protect_basic_auth",
    "AuthType",
    "AuthProvider",
    "AuthWrapper",
    "new_auth_wrapper",
]
