# cinereview/services/auth/jwt_verifier.py
from __future__ import annotations

from typing import Any, Dict, Optional

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from cinereview.common.logging import get_logger
from cinereview.common.settings import AuthConfig, get_settings
from cinereview.domain.errors import Unauthenticated

logger = get_logger()


class JwtIdentityVerifier:
    """
    IdentityVerifierPort over signed JWTs. The verified user id is read from
    `user_id_claim` (default: `sub`); nothing else in the token is trusted.
    """

    def __init__(self, cfg: Optional[AuthConfig] = None) -> None:
        self.cfg = cfg or get_settings().auth

    def _decode(self, token: str) -> Dict[str, Any]:
        options = {"verify_aud": bool(self.cfg.jwt_audience)}
        return jwt.decode(
            token,
            self.cfg.jwt_secret,
            algorithms=self.cfg.jwt_algorithms,
            audience=self.cfg.jwt_audience,
            issuer=self.cfg.jwt_issuer,
            options=options,
        )

    def verify(self, credential: str | None) -> str:
        token = (credential or "").strip()
        if not token:
            raise Unauthenticated("No token provided")
        try:
            claims = self._decode(token)
        except ExpiredSignatureError as e:
            raise Unauthenticated("Token expired") from e
        except JWTError as e:
            logger.info("rejected bearer token: %s", e)
            raise Unauthenticated("Invalid token") from e

        uid = claims.get(self.cfg.user_id_claim)
        if not uid:
            raise Unauthenticated("Invalid token")
        return str(uid)
