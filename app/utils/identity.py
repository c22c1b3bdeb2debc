# app/utils/identity.py
"""
Tagged identities and the dual-pool resolver.

A token subject is resolved exactly once, at the request boundary, into either
a ``Contributor`` or a ``Manager``. Everything downstream looks at ``role`` only.
"""
import logging
from dataclasses import dataclass, field
from typing import Union

from app.models.user import Admin, Employee, Role
from app.repositories.identity import IdentityRepository
from app.utils.errors import UnknownSubject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Contributor:
    id: str
    name: str
    email: str
    department_id: str
    role: Role = field(default=Role.CONTRIBUTOR, init=False)

    @classmethod
    def from_record(cls, record: Employee) -> "Contributor":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            department_id=record.department_id,
        )


@dataclass(frozen=True)
class Manager:
    id: str
    name: str
    email: str
    department_id: str
    role: Role = field(default=Role.MANAGER, init=False)

    @classmethod
    def from_record(cls, record: Admin) -> "Manager":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            department_id=record.department_id,
        )


Identity = Union[Contributor, Manager]


class IdentityResolver:
    """Maps a token subject to exactly one identity.

    The employee pool is always probed first; a hit there wins even when an
    admin with the same id exists, and the admin pool is not queried.
    """

    def __init__(self, identities: IdentityRepository):
        self.identities = identities

    def resolve(self, subject_id: str) -> Identity:
        employee = self.identities.get_employee(subject_id)
        if employee is not None:
            return Contributor.from_record(employee)

        admin = self.identities.get_admin(subject_id)
        if admin is not None:
            return Manager.from_record(admin)

        logger.warning("Token subject %s matches no identity", subject_id)
        raise UnknownSubject()
