import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.identity import IdentityRepository
from app.schemas.user import UserLogin
from app.schemas.tokens import LoginResponse
from app.utils.errors import InvalidCredential, NotFound
from app.utils.security import CredentialVerifier, get_credential_verifier, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    user: UserLogin,
    db: Session = Depends(get_db),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    """Employee login, only the employee pool is checked"""
    employee = IdentityRepository(db).get_employee_by_email(user.email)
    if employee is None:
        raise NotFound("User not found")
    if not verify_password(user.password, employee.hashed_password):
        logger.warning("Incorrect password for employee %s", employee.id)
        raise InvalidCredential("Incorrect password")

    return LoginResponse(
        access_token=verifier.issue(employee.id),
        role=employee.role,
        name=employee.name,
        department=employee.department.name,
    )


@router.post("/admin-login", response_model=LoginResponse)
def admin_login(
    user: UserLogin,
    db: Session = Depends(get_db),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    """Admin login, only the admin pool is checked"""
    admin = IdentityRepository(db).get_admin_by_email(user.email)
    if admin is None:
        raise NotFound("User does not exist")
    if not verify_password(user.password, admin.hashed_password):
        logger.warning("Incorrect password for admin %s", admin.id)
        raise InvalidCredential("Incorrect password")

    return LoginResponse(
        access_token=verifier.issue(admin.id),
        role=admin.role,
        name=admin.name,
        department=admin.department.name,
    )
