# File: med_portal/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for the SQLAlchemy models used by the SQL credential store.
    """
    pass
