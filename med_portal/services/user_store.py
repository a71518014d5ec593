# File: med_portal/services/user_store.py

"""
Credential stores.

Every store keeps email/name/hash records and exposes the same three calls:

  - ensure(): create the backing storage if missing
  - load():   read every record into a dict keyed by lowercased email
  - append(): add one record at the end

Nothing is ever updated or deleted, and duplicates are not rejected here.
When the same email appears more than once, load() keeps the last one.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.engine import Engine

from med_portal.core.config import Settings
from med_portal.db.init_db import init_db
from med_portal.db.session import make_engine, make_session_factory
from med_portal.models.user import User
from med_portal.schemas.user import UserRecord

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    def ensure(self) -> None: ...

    def load(self) -> Dict[str, UserRecord]: ...

    def append(self, email: str, name: str, password_hash: str) -> None: ...


# -----------------------------
# Line format helpers
# -----------------------------

def clean_name(name: str) -> str:
    """Commas are the field separator, so they can't survive in a name."""
    return str(name).replace(",", " ")


def format_line(email: str, name: str, password_hash: str) -> str:
    return f"{email.lower()},{clean_name(name)},{password_hash}\n"


def parse_line(line: str) -> Optional[UserRecord]:
    """
    Parse one ``email,name,hash`` line.

    Returns None for blank lines and for lines missing an email or a hash.
    Fields past the third are ignored.
    """
    row = line.strip()
    if not row:
        return None

    parts = row.split(",")
    email = parts[0]
    name = parts[1] if len(parts) > 1 else ""
    password_hash = parts[2] if len(parts) > 2 else ""
    if not email or not password_hash:
        return None

    return UserRecord(email=email.lower(), name=name, password_hash=password_hash)


def parse_lines(lines) -> Dict[str, UserRecord]:
    users: Dict[str, UserRecord] = {}
    for line in lines:
        record = parse_line(line)
        if record is not None:
            users[record.email] = record
    return users


# -----------------------------
# Flat file (default)
# -----------------------------

class FileUserStore:
    """users.txt, one ``email,name,hash`` line per user."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def ensure(self) -> None:
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch()
        logger.info("Created empty credentials file at %s", self.path)

    def load(self) -> Dict[str, UserRecord]:
        self.ensure()
        text = self.path.read_text(encoding="utf-8")
        return parse_lines(text.split("\n"))

    def append(self, email: str, name: str, password_hash: str) -> None:
        with self.path.open("a", encoding="utf-8") as f:
            f.write(format_line(email, name, password_hash))


# -----------------------------
# In memory (tests, throwaway runs)
# -----------------------------

class InMemoryUserStore:
    def __init__(self, lines: Optional[List[str]] = None):
        self.lines: List[str] = list(lines or [])

    def ensure(self) -> None:
        pass

    def load(self) -> Dict[str, UserRecord]:
        return parse_lines(self.lines)

    def append(self, email: str, name: str, password_hash: str) -> None:
        self.lines.append(format_line(email, name, password_hash))


# -----------------------------
# SQL via SQLAlchemy
# -----------------------------

class SqlUserStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = make_session_factory(engine)
        self._ready = False

    @classmethod
    def from_url(cls, database_url: str) -> "SqlUserStore":
        return cls(make_engine(database_url))

    def ensure(self) -> None:
        # Table creation runs once per store; rows are still reread on load()
        if self._ready:
            return
        init_db(self.engine)
        self._ready = True

    def load(self) -> Dict[str, UserRecord]:
        self.ensure()
        users: Dict[str, UserRecord] = {}
        with self.session_factory() as db:
            # Insertion order, so the newest duplicate wins like the file
            for row in db.scalars(select(User).order_by(User.id)):
                if not row.email or not row.password_hash:
                    continue
                users[row.email.lower()] = UserRecord(
                    email=row.email.lower(),
                    name=row.name,
                    password_hash=row.password_hash,
                )
        return users

    def append(self, email: str, name: str, password_hash: str) -> None:
        with self.session_factory() as db:
            db.add(
                User(
                    email=email.lower(),
                    name=clean_name(name),
                    password_hash=password_hash,
                )
            )
            db.commit()


def build_user_store(settings: Settings) -> UserStore:
    backend = settings.user_store_backend
    if backend == "memory":
        store: UserStore = InMemoryUserStore()
    elif backend == "sql":
        store = SqlUserStore.from_url(settings.database_url)
    else:
        store = FileUserStore(settings.users_file)

    logger.info("Using %s credential store", backend)
    return store
