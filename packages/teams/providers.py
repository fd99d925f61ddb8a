"""Authentication provider tags and the per-team provider registry.

Two closed enumerations are kept separate:
- AuthType: the mechanism class (static credentials vs OAuth-style)
- AuthProvider: the concrete provider a team can enable

Adding a provider means extending AuthProvider and adding the matching
variant in packages.teams.models together.
"""

from collections.abc import Iterable, Iterator
from enum import Enum

from pydantic import ConfigDict, RootModel


class AuthType(str, Enum):
    """Authentication mechanism class."""

    BASIC = "basic"
    OAUTH = "oauth"


class AuthProvider(str, Enum):
    """Concrete authentication provider tag."""

    BASIC = "basic"
    GITHUB = "github"
    UAA = "uaa"
    GENERIC_OAUTH = "oauth"

    @property
    def auth_type(self) -> AuthType:
        if self is AuthProvider.BASIC:
            return AuthType.BASIC
        return AuthType.OAUTH

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return _LEGACY_TAGS.get(value)
        return None


# Spellings found in previously stored configuration
_LEGACY_TAGS = {
    "basicAuthProvider": AuthProvider.BASIC,
    "githubAuthProvider": AuthProvider.GITHUB,
    "uaaAuthProvider": AuthProvider.UAA,
    "oauthProvider": AuthProvider.GENERIC_OAUTH,
    "generic-oauth": AuthProvider.GENERIC_OAUTH,
}


class AuthWrapper(RootModel[tuple[AuthProvider, ...]]):
    """Ordered registry of the providers enabled for a team.

    Order is priority/display order. Duplicates are kept as given; deciding
    whether a named provider is usable is left to the caller that also
    holds the team's variant configuration. An empty registry means the
    team has no usable login path, which is not an error.
    """

    model_config = ConfigDict(frozen=True)

    root: tuple[AuthProvider, ...] = ()

    @property
    def providers(self) -> tuple[AuthProvider, ...]:
        return self.root

    @property
    def is_empty(self) -> bool:
        return not self.root

    def __iter__(self) -> Iterator[AuthProvider]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str) and not isinstance(item, AuthProvider):
            try:
                item = AuthProvider(item)
            except ValueError:
                return False
        return item in self.root


def new_auth_wrapper(providers: Iterable[AuthProvider | str] = ()) -> AuthWrapper:
    """Build a registry from provider tags, preserving order."""
    return AuthWrapper(tuple(AuthProvider(p) for p in providers))
