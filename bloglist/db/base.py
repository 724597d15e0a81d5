"""
SQLAlchemy declarative base and metadata.
Constraint names follow one convention so Alembic autogenerate stays stable.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for blog, post and tag tables."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
