from yogaswiss.models.base import Base, TimestampMixin
from yogaswiss.models.preference import UserPreference

__all__ = [
    "Base",
    "TimestampMixin",
    "UserPreference",
]
