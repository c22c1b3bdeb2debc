# app/utils/auth.py
from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import Role
from app.repositories.identity import IdentityRepository
from app.utils.errors import Forbidden
from app.utils.identity import Identity, IdentityResolver
from app.utils.security import CredentialVerifier, get_credential_verifier

# Missing headers are reported by the verifier, not by the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

_FORBIDDEN_DETAIL = {
    Role.MANAGER: "Only Admins can access this resource",
    Role.CONTRIBUTOR: "Only Employees can access this resource",
}


def require_role(identity: Identity, required_role: Role, detail: Optional[str] = None) -> None:
    """Exact tag match, a manager is not implicitly allowed on employee endpoints"""
    try:
        default_detail = _FORBIDDEN_DETAIL[required_role]
    except KeyError:
        raise ValueError(f"Unsupported role: {required_role!r}") from None

    if identity.role is not required_role:
        raise Forbidden(detail or default_detail)


def get_current_identity(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
) -> Identity:
    subject_id = verifier.verify(token)
    identity = IdentityResolver(IdentityRepository(db)).resolve(subject_id)
    # Only reached once resolution succeeded
    request.state.identity = identity
    return identity


def require_identity(required_role: Optional[Role] = None, detail: Optional[str] = None) -> Callable:
    """Dependency factory; ``None`` means any authenticated identity"""

    def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        if required_role is not None:
            require_role(identity, required_role, detail)
        return identity

    return dependency


def require_manager(detail: Optional[str] = None) -> Callable:
    return require_identity(Role.MANAGER, detail)


def require_contributor(detail: Optional[str] = None) -> Callable:
    return require_identity(Role.CONTRIBUTOR, detail)
