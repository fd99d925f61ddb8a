"""Tests for provider tags and the AuthWrapper registry."""

import pytest
from pydantic import ValidationError

from packages.teams.providers import (
    AuthProvider,
    AuthType,
    AuthWrapper,
    new_auth_wrapper,
)


class TestAuthProvider:
    """Tests for the closed provider tag set."""

    def test_canonical_tags(self):
        assert [p.value for p in AuthProvider] == ["basic", "github", "uaa", "oauth"]

    def test_auth_type(self):
        assert AuthProvider.BASIC.auth_type is AuthType.BASIC
        assert AuthProvider.GITHUB.auth_type is AuthType.OAUTH
        assert AuthProvider.UAA.auth_type is AuthType.OAUTH
        assert AuthProvider.GENERIC_OAUTH.auth_type is AuthType.OAUTH

    @pytest.mark.parametrize(
        "legacy,expected",
        [
            ("basicAuthProvider", AuthProvider.BASIC),
            ("githubAuthProvider", AuthProvider.GITHUB),
            ("uaaAuthProvider", AuthProvider.UAA),
            ("oauthProvider", AuthProvider.GENERIC_OAUTH),
            ("generic-oauth", AuthProvider.GENERIC_OAUTH),
        ],
    )
    def test_legacy_tags_normalized(self, legacy, expected):
        assert AuthProvider(legacy) is expected

    def test_unknown_tag_rejected(self):
        with pytest.raises(ValueError):
            AuthProvider("ldap")


class TestAuthWrapper:
    """Tests for the ordered registry."""

    def test_order_preserved(self):
        wrapper = new_auth_wrapper(["basic", "github"])
        assert list(wrapper) == [AuthProvider.BASIC, AuthProvider.GITHUB]

    def test_duplicates_kept(self):
        wrapper = new_auth_wrapper(["github", "github"])
        assert len(wrapper) == 2

    def test_empty(self):
        wrapper = new_auth_wrapper([])
        assert wrapper.is_empty
        assert list(wrapper) == []
        assert AuthWrapper().is_empty

    def test_membership_accepts_strings(self):
        wrapper = new_auth_wrapper([AuthProvider.UAA])
        assert "uaa" in wrapper
        assert AuthProvider.UAA in wrapper
        assert "github" not in wrapper
        assert "not-a-provider" not in wrapper

    def test_encodes_as_tag_list(self):
        wrapper = new_auth_wrapper(["oauth", "basic"])
        assert wrapper.model_dump_json() == '["oauth","basic"]'
        assert AuthWrapper.model_validate_json('["oauth","basic"]') == wrapper

    def test_unknown_tag_rejected_on_construction(self):
        with pytest.raises(ValueError):
            new_auth_wrapper(["basic", "ldap"])

    def test_unknown_tag_rejected_on_decode(self):
        with pytest.raises(ValidationError):
            AuthWrapper.model_validate_json('["ldap"]')

    def test_immutable(self):
        wrapper = new_auth_wrapper(["basic"])
        with pytest.raises(ValidationError):
            wrapper.root = ()
