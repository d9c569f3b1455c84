"""
Custom SQLAlchemy types for database compatibility across different database engines.

This module provides custom type implementations that work consistently across
different database backends (SQLite, PostgreSQL) while maintaining proper data
representation and conversion.
"""

from datetime import timezone

from sqlalchemy.types import DateTime, TypeDecorator


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware UTC timestamp for SQLAlchemy models.

    PostgreSQL stores the offset natively; SQLite drops it and returns naive
    values. Values are normalized to UTC on the way in and always come back
    timezone-aware, whatever the backend.

    Usage:
        ```python
        from passenger_service.models.custom_types import UTCDateTime

        class MyModel(Base):
            __tablename__ = "my_table"

            created_at = Column(UTCDateTime, nullable=False)
        ```
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        """
        Convert a datetime to UTC before it is stored.

        Naive values are taken to be UTC already.
        """
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        """
        Attach UTC to values the database returns without an offset.
        """
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
