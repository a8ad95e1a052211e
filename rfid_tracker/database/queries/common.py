"""Shared utilities for database query modules."""

import sqlalchemy as sa
from sqlalchemy.orm import Session


def count_rows(session: Session, stmt: sa.Select) -> int:
    """Count the rows a filtered select would return, ignoring ordering and paging."""
    total = session.execute(
        sa.select(sa.func.count()).select_from(stmt.order_by(None).subquery())
    ).scalar_one()
    return int(total or 0)
