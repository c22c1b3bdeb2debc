# app/utils/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from app.config.security import SecurityConfig
from app.utils.errors import AbsentCredential, InvalidCredential


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=SecurityConfig.PASSWORD['bcrypt_rounds'])
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


class CredentialVerifier:
    """Issues and verifies signed bearer tokens carrying an identity id in ``sub``"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, subject_id: str, expires_delta: Optional[timedelta] = None) -> str:
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        payload = {"sub": str(subject_id), "iat": now, "exp": expire}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> str:
        if not token:
            raise AbsentCredential()
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            # ExpiredSignatureError is a JWTError too
            raise InvalidCredential() from exc

        subject_id = payload.get("sub")
        if not subject_id:
            raise InvalidCredential()
        return subject_id


def get_credential_verifier() -> CredentialVerifier:
    return CredentialVerifier(
        secret_key=SecurityConfig.get_secret_key(),
        algorithm=SecurityConfig.JWT['algorithm'],
        expire_minutes=SecurityConfig.JWT['access_token_expire_minutes'],
    )
