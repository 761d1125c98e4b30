"""
Access token signing and verification
"""
import enum
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

ALGORITHM = "HS256"


class TokenErrorKind(str, enum.Enum):
    EXPIRED = "expired"
    INVALID_SIGNATURE = "invalid_signature"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class TokenVerification:
    """Outcome of ``verify_token``: either claims or an error kind, never both"""

    claims: Optional[Dict[str, Any]] = None
    error: Optional[TokenErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def create_access_token(claims: Dict[str, Any], secret: str, expires_delta: timedelta) -> str:
    """Sign ``claims`` together with an expiry ``expires_delta`` from now"""
    to_encode = dict(claims)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, secret, algorithm=ALGORITHM)


def verify_token(token: str, secret: str) -> TokenVerification:
    """Decode ``token``; bad tokens are reported in the result, not raised"""
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        return TokenVerification(error=TokenErrorKind.EXPIRED)
    except jwt.InvalidSignatureError:
        return TokenVerification(error=TokenErrorKind.INVALID_SIGNATURE)
    except jwt.InvalidTokenError:
        return TokenVerification(error=TokenErrorKind.MALFORMED)
    return TokenVerification(claims=claims)
