"""
Provision demo tenants and users.

Usage:
    python -m app.seed

Creates tables if they are missing, then makes sure the Acme and Globex
tenants exist with one ADMIN and one MEMBER each. Running it twice is safe.
All demo users share the password "password".
"""

import logging

from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.database import SessionLocal, init_db
from app.models.role import UserRole
from app.models.tenant import Tenant, TenantPlan
from app.models.user import User
from app.repositories.tenant_repository import TenantRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "password"

SEED_TENANTS = [
    {
        "slug": "acme",
        "name": "Acme",
        "users": [
            ("admin@acme.test", UserRole.ADMIN),
            ("user@acme.test", UserRole.MEMBER),
        ],
    },
    {
        "slug": "globex",
        "name": "Globex",
        "users": [
            ("admin@globex.test", UserRole.ADMIN),
            ("user@globex.test", UserRole.MEMBER),
        ],
    },
]


def seed(db: Session, password: str = DEFAULT_PASSWORD) -> list[Tenant]:
    """
    Create the demo tenants and users that don't exist yet.

    Existing tenants and users are left untouched (plans are never reset).

    Returns:
        The seeded tenants, in SEED_TENANTS order
    """
    tenant_repo = TenantRepository(db)
    user_repo = UserRepository(db)
    password_hash = hash_password(password)

    tenants = []
    for entry in SEED_TENANTS:
        tenant = tenant_repo.get_by_slug(entry["slug"])
        if not tenant:
            tenant = tenant_repo.create(
                Tenant(slug=entry["slug"], name=entry["name"], plan=TenantPlan.FREE)
            )
            logger.info("Created tenant %s", tenant.slug)

        for email, role in entry["users"]:
            if user_repo.get_by_email(email):
                continue
            user_repo.create(
                User(email=email, password_hash=password_hash, role=role, tenant_id=tenant.id)
            )
            logger.info("Created %s user %s", role.value, email)

        tenants.append(tenant)
    return tenants


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    init_db()
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
