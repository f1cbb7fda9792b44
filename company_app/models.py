"""
Database models for the reference company service.

This module defines the SQLAlchemy model backing the ``/company``
resource. Each model maps to a database table.
"""

from datetime import datetime, timezone
from typing import Any

from company_app import db

# Fields a client sends in a company payload, in wire order.
COMPANY_FIELDS = ("name", "cnpj", "state", "city", "address", "sector")


class Company(db.Model):
    """
    Company model representing a registered business.

    Attributes:
        id: Server-assigned unique identifier.
        name: Company display name.
        cnpj: 14-digit Brazilian tax identifier (digits only).
        state: Short state code, e.g. ``SC``.
        city: City the company is located in.
        address: Street address.
        sector: Free-text business sector.
        created_at: Timestamp when the record was created.
        updated_at: Timestamp when the record was last modified.
    """

    __tablename__ = "companies"

    id: int = db.Column(db.Integer, primary_key=True)
    name: str = db.Column(db.String(200), nullable=False)
    cnpj: str = db.Column(db.String(14), nullable=False)
    state: str = db.Column(db.String(2), nullable=False)
    city: str = db.Column(db.String(100), nullable=False)
    address: str = db.Column(db.String(200), nullable=False)
    sector: str | None = db.Column(db.String(100), nullable=True)
    created_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )
    updated_at: datetime = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )

    def apply(self, data: dict[str, Any]) -> None:
        """Copy every company field present in ``data`` onto the record."""
        for field in COMPANY_FIELDS:
            if field in data:
                setattr(self, field, data[field])

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the company to its JSON representation.

        Returns:
            Dictionary with ``id`` and the six company fields.
        """
        return {
            "id": self.id,
            "name": self.name,
            "cnpj": self.cnpj,
            "state": self.state,
            "city": self.city,
            "address": self.address,
            "sector": self.sector,
        }

    def __repr__(self) -> str:
        """Return string representation of the company."""
        return f"<Company {self.id}: {self.name}>"
