"""Tenant model for multi-tenant isolation."""

from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.note import Note


class TenantPlan(str, PyEnum):
    """
    Subscription plan governing the note quota.

    FREE tenants are capped at a small number of notes, PRO tenants are
    unlimited. Plans only ever move FREE -> PRO.
    """

    FREE = "free"
    PRO = "pro"


class Tenant(Base, TimestampMixin):
    """
    Multi-tenant isolation boundary.

    A tenant is a customer organization. It owns its users and notes;
    deleting a tenant removes both. Tenants are created by provisioning
    (see app/seed.py) and only ever modified by the plan upgrade.
    """

    __tablename__ = "tenants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    plan: Mapped[TenantPlan] = mapped_column(
        Enum(TenantPlan, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=TenantPlan.FREE,
    )

    # Relationships
    users: Mapped[list["User"]] = relationship(
        "User",
        back_populates="tenant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    notes: Mapped[list["Note"]] = relationship(
        "Note",
        back_populates="tenant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Tenant(id={self.id}, slug='{self.slug}', plan={self.plan.value})>"
