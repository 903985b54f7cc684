"""Project ORM — the `projects` table.

Invariants:
    - id is a UUID4 string generated on insert by the column default, never supplied by clients
    - title is non-nullable
    - Column order (id, title) matches domain record field order — rows are mapped positionally

Design Decisions:
    - String(36) over native UUID: same column type on PostgreSQL and SQLite test databases,
      and the identifier stays opaque to the API
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from changelogger.db.base import Base


def generate_project_id() -> str:
    return str(uuid.uuid4())


class Project(Base):
    """Project row."""
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=generate_project_id,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
