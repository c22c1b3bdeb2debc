# create_tables.py
import argparse
import logging

from sqlalchemy.orm import Session

from app.config.security import SecurityConfig
from app.database import Base, SessionLocal, engine
from app.models import Admin
from app.repositories.department import DepartmentRepository
from app.repositories.identity import IdentityRepository
from app.utils.security import hash_password

logger = logging.getLogger("create_tables")


def create_tables(reset: bool = False):
    """Create all tables, optionally dropping the existing ones first"""
    if reset:
        Base.metadata.drop_all(bind=engine)
        logger.info("Dropped existing tables")

    Base.metadata.create_all(bind=engine)
    logger.info("✅ All tables created successfully!")

    db = SessionLocal()
    try:
        seed_departments(db)
        create_default_admin(db)
    finally:
        db.close()


def seed_departments(db: Session):
    departments = DepartmentRepository(db)
    for name in SecurityConfig.BOOTSTRAP['departments']:
        if departments.get_by_name(name) is None:
            departments.create(name)
            logger.info("Created department %s", name)


def create_default_admin(db: Session):
    """Identities can only be created by an admin, so the first one is seeded here"""
    bootstrap = SecurityConfig.BOOTSTRAP
    identities = IdentityRepository(db)

    if identities.email_exists(bootstrap['admin_email']):
        logger.info("ℹ️  Admin user already exists")
        return

    departments = DepartmentRepository(db)
    department = departments.get_by_name(bootstrap['admin_department'])
    if department is None:
        department = departments.create(bootstrap['admin_department'])

    identities.create(Admin(
        name=bootstrap['admin_name'],
        email=bootstrap['admin_email'],
        hashed_password=hash_password(bootstrap['admin_password']),
        department_id=department.id,
    ))
    logger.info("✅ Default admin user created: %s", bootstrap['admin_email'])


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Create tables and seed the first admin")
    parser.add_argument("--reset", action="store_true", help="drop existing tables first")
    args = parser.parse_args()
    create_tables(reset=args.reset)
