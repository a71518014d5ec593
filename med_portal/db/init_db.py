"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from sqlalchemy.engine import Engine

from med_portal.models.base import Base
from med_portal.models import user  # noqa: F401


def init_db(engine: Engine) -> None:
    """
    Create the users table if it does not exist yet.
    """
    Base.metadata.create_all(bind=engine)
