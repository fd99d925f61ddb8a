"""Team authentication configuration models.

A Team carries up to one configuration per authentication mechanism
(basic, GitHub, UAA, generic OAuth) plus the ordered registry of
providers that are enabled. A variant set to None means the mechanism
is not configured for the team.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from packages.teams.errors import EncodingError
from packages.teams.protector import encrypted_json, is_bcrypt_hash, protect_basic_auth
from packages.teams.providers import AuthProvider, AuthWrapper

logger = logging.getLogger(__name__)


class AuthVariant(BaseModel):
    """Base for a single provider's configuration payload."""

    model_config = ConfigDict(frozen=True)

    provider: ClassVar[AuthProvider]


class BasicAuth(AuthVariant):
    """Static username/password credential."""

    provider: ClassVar[AuthProvider] = AuthProvider.BASIC

    basic_auth_username: str = Field(default="", description="Login username")
    basic_auth_password: str = Field(
        default="",
        repr=False,
        description="Plaintext password before protection, bcrypt hash after",
    )

    @property
    def is_set(self) -> bool:
        """Both fields non-empty; anything else counts as no credential."""
        return bool(self.basic_auth_username and self.basic_auth_password)

    @property
    def is_protected(self) -> bool:
        """Password already holds a bcrypt hash, as loaded from storage."""
        return is_bcrypt_hash(self.basic_auth_password)

    def encrypted_json(self, cost: int | None = None) -> str:
        """Encode this credential with the password hashed."""
        return encrypted_json(self, cost)


class GitHubTeam(BaseModel):
    """An organization/team pair allowed to log in."""

    model_config = ConfigDict(frozen=True)

    organization_name: str
    team_name: str


class GitHubAuth(AuthVariant):
    """GitHub OAuth configuration.

    A user matching any of organizations, teams or users is granted access.
    Empty URLs mean the provider defaults are used.
    """

    provider: ClassVar[AuthProvider] = AuthProvider.GITHUB

    client_id: str = ""
    client_secret: str = Field(default="", repr=False)
    organizations: tuple[str, ...] = ()
    teams: tuple[GitHubTeam, ...] = ()
    users: tuple[str, ...] = ()
    auth_url: str = ""
    token_url: str = ""
    api_url: str = ""


class UAAAuth(AuthVariant):
    """UAA / CloudFoundry OAuth configuration."""

    provider: ClassVar[AuthProvider] = AuthProvider.UAA

    client_id: str = ""
    client_secret: str = Field(default="", repr=False)
    auth_url: str = ""
    token_url: str = ""
    cf_spaces: tuple[str, ...] = ()
    cf_url: str = ""
    cf_ca_cert: str = ""


class GenericOAuth(AuthVariant):
    """Generic OAuth2 provider configuration."""

    provider: ClassVar[AuthProvider] = AuthProvider.GENERIC_OAUTH

    auth_url: str = ""
    auth_url_params: dict[str, str] = Field(default_factory=dict)
    token_url: str = ""
    client_id: str = ""
    client_secret: str = Field(default="", repr=False)
    display_name: str = ""
    scope: str = ""


# Field holding each provider's variant on Team
VARIANT_FIELDS: dict[AuthProvider, str] = {
    AuthProvider.BASIC: "basic_auth",
    AuthProvider.GITHUB: "github_auth",
    AuthProvider.UAA: "uaa_auth",
    AuthProvider.GENERIC_OAUTH: "genericoauth_auth",
}


class Team(BaseModel):
    """A tenant's authentication configuration.

    Values are immutable; changing a team means building a new Team.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Team name, unique within the system")
    admin: bool = Field(default=False, description="Elevated privilege flag")
    auth_wrapper: AuthWrapper = Field(
        default_factory=AuthWrapper,
        description="Enabled providers in priority order",
    )

    basic_auth: BasicAuth | None = None
    github_auth: GitHubAuth | None = None
    uaa_auth: UAAAuth | None = None
    genericoauth_auth: GenericOAuth | None = None

    def variant(self, provider: AuthProvider | str) -> AuthVariant | None:
        """Return the configuration attached for a provider, if any."""
        return getattr(self, VARIANT_FIELDS[AuthProvider(provider)])

    def has_variant(self, provider: AuthProvider | str) -> bool:
        return self.variant(provider) is not None

    def configured_providers(self) -> list[AuthProvider]:
        """Providers with a variant attached, whether enabled or not."""
        return [p for p in VARIANT_FIELDS if self.has_variant(p)]

    def is_enabled(self, provider: AuthProvider | str) -> bool:
        """Configured and named in the registry."""
        provider = AuthProvider(provider)
        return provider in self.auth_wrapper and self.has_variant(provider)

    def enabled_providers(self) -> list[AuthProvider]:
        """Registry order, restricted to providers that have a variant."""
        enabled: list[AuthProvider] = []
        for provider in self.auth_wrapper:
            if provider in enabled:
                continue
            if not self.has_variant(provider):
                logger.debug(
                    "Team %s enables provider %s without configuring it",
                    self.name,
                    provider.value,
                )
                continue
            enabled.append(provider)
        return enabled

    def has_login_path(self) -> bool:
        return bool(self.enabled_providers())

    def with_protected_credentials(self, cost: int | None = None) -> Team:
        """Return a copy whose basic auth password is hashed.

        An unset basic auth pair is dropped to None; an already hashed one
        is kept, so a loaded team can be saved again.
        """
        return self.model_copy(
            update={"basic_auth": protect_basic_auth(self.basic_auth, cost)}
        )

    def to_storage_json(self, cost: int | None = None) -> str:
        """Encode the team for persistence; never contains a plaintext password.

        Raises:
            HashingError: If hashing fails
            EncodingError: If serialization fails
        """
        protected = self.with_protected_credentials(cost)
        try:
            return protected.model_dump_json()
        except PydanticSerializationError as e:
            logger.error("Failed to encode team %s: %s", self.name, e)
            raise EncodingError(f"Team encoding failed: {e}") from e


class SavedTeam(Team):
    """A Team with the identity assigned by the persistence layer."""

    id: int = Field(description="Persistence-assigned identifier")

    @classmethod
    def from_team(cls, team_id: int, team: Team) -> SavedTeam:
        fields = {name: getattr(team, name) for name in Team.model_fields}
        return cls(id=team_id, **fields)

    def get_auth_wrapper(self) -> AuthWrapper:
        return self.auth_wrapper
