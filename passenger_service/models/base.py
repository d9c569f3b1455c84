"""
Base model configuration for SQLAlchemy ORM.

This module defines the base declarative class that all model classes
will inherit from.

Usage:
    from passenger_service.models.base import Base

    class MyModel(Base):
        __tablename__ = "my_table"

        id = Column(Integer, primary_key=True)
        name = Column(String)
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
