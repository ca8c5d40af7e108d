import pytest

from cinereview.common.settings import AuthConfig
from cinereview.domain.errors import Unauthenticated
from cinereview.services.auth.jwt_verifier import JwtIdentityVerifier


@pytest.fixture()
def verifier():
    return JwtIdentityVerifier(AuthConfig(jwt_secret="test-secret"))


def test_valid_token_yields_subject(verifier, token_for):
    assert verifier.verify(token_for("user123")) == "user123"


@pytest.mark.parametrize("credential", [None, "", "   "])
def test_missing_token(verifier, credential):
    with pytest.raises(Unauthenticated, match="No token provided"):
        verifier.verify(credential)


def test_expired_token(verifier, token_for):
    with pytest.raises(Unauthenticated, match="Token expired"):
        verifier.verify(token_for("user123", ttl=-60))


def test_wrong_signature(verifier, token_for):
    with pytest.raises(Unauthenticated, match="Invalid token"):
        verifier.verify(token_for("user123", secret="someone-else"))


def test_garbage_token(verifier):
    with pytest.raises(Unauthenticated, match="Invalid token"):
        verifier.verify("not.a.jwt")


def test_token_without_subject(verifier, token_for):
    with pytest.raises(Unauthenticated, match="Invalid token"):
        verifier.verify(token_for(""))


def test_custom_claim_and_audience(token_for):
    cfg = AuthConfig(jwt_secret="test-secret", jwt_audience="cinereview", user_id_claim="uid")
    v = JwtIdentityVerifier(cfg)
    token = token_for("ignored", uid="user456", aud="cinereview")
    assert v.verify(token) == "user456"
    with pytest.raises(Unauthenticated):
        v.verify(token_for("x", uid="user456", aud="elsewhere"))
