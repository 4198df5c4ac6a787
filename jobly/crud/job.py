"""
CRUD operations for jobs.

Every operation issues parameterized SQL through `jobly.core.database.query`
and returns plain dicts keyed by column name; the API layer shapes them into
response schemas.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional
from sqlalchemy.orm import Session

from jobly.core.database import query
from jobly.core.errors import NotFoundError
from jobly.helpers.sql import sql_for_partial_update
from jobly.models.job import Job
from jobly.schemas.job import JobSearchFilters

logger = logging.getLogger(__name__)

UPDATABLE_COLUMNS = frozenset(c for c in Job.__table__.columns.keys() if c != "id")


def _normalize(row: Dict[str, Any]) -> Dict[str, Any]:
    # SQLite hands NUMERIC back as int/float; Postgres as Decimal
    equity = row.get("equity")
    if equity is not None and not isinstance(equity, Decimal):
        row["equity"] = Decimal(str(equity))
    return row


def create(
    db: Session,
    title: str,
    salary: Optional[int],
    equity: Optional[Decimal],
    company_handle: str
) -> Dict[str, Any]:
    """
    Create a new job in the database.

    Args:
        db: Database session
        title: Job title
        salary: Optional yearly salary
        equity: Optional equity fraction, 0 to 1
        company_handle: Handle of the company posting the job

    Returns:
        {id, title, salary, equity, company_handle}
    """
    rows = query(
        db,
        """INSERT INTO jobs (title, salary, equity, company_handle)
           VALUES ($1, $2, $3, $4)
           RETURNING id, title, salary, equity, company_handle""",
        [title, salary, equity, company_handle],
    )
    db.commit()

    job = _normalize(rows[0])
    logger.info(f"Created job {job['id']}: {job['title']} ({company_handle})")
    return job


def find_all(db: Session, filters: Optional[JobSearchFilters] = None) -> List[Dict[str, Any]]:
    """
    Retrieve jobs, optionally narrowed by search filters, ordered by title.

    Args:
        db: Database session
        filters: title (case-insensitive substring), min_salary (inclusive),
            has_equity (True keeps only equity > 0; False filters nothing)

    Returns:
        List of {id, title, salary, equity, company_handle, company_name}
    """
    sql = """SELECT j.id,
                    j.title,
                    j.salary,
                    j.equity,
                    j.company_handle,
                    c.name AS company_name
             FROM jobs j
             LEFT JOIN companies AS c ON c.handle = j.company_handle"""

    values: List[Any] = []
    where: List[str] = []

    if filters is not None:
        if filters.min_salary is not None:
            values.append(filters.min_salary)
            where.append(f"j.salary >= ${len(values)}")

        if filters.has_equity:
            where.append("j.equity > 0")

        if filters.title is not None:
            values.append(f"%{filters.title}%")
            where.append(f"LOWER(j.title) LIKE LOWER(${len(values)})")

    if where:
        sql += " WHERE " + " AND ".join(where)
    sql += " ORDER BY j.title"

    return [_normalize(row) for row in query(db, sql, values)]


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Retrieve a job by its ID, with its company nested under `company`.

    Returns:
        {id, title, salary, equity, company: {handle, name, description,
        num_employees, logo_url}}

    Raises:
        NotFoundError: If no job has this ID
    """
    rows = query(
        db,
        """SELECT id, title, salary, equity, company_handle
           FROM jobs
           WHERE id = $1""",
        [job_id],
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")

    job = _normalize(rows[0])
    companies = query(
        db,
        """SELECT handle, name, description, num_employees, logo_url
           FROM companies
           WHERE handle = $1""",
        [job.pop("company_handle")],
    )
    job["company"] = companies[0] if companies else None

    return job


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job: only the fields present in `data` change.

    Args:
        db: Database session
        job_id: Job ID to update
        data: Any of title, salary, equity

    Returns:
        {id, title, salary, equity, company_handle}

    Raises:
        BadRequestError: If data is empty or names an unknown column
        NotFoundError: If no job has this ID
    """
    partial = sql_for_partial_update(data, {}, allowed_columns=UPDATABLE_COLUMNS)
    id_idx = len(partial.values) + 1

    rows = query(
        db,
        f"""UPDATE jobs
            SET {partial.set_cols}
            WHERE id = ${id_idx}
            RETURNING id, title, salary, equity, company_handle""",
        [*partial.values, job_id],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return _normalize(rows[0])


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has this ID
    """
    rows = query(
        db,
        """DELETE FROM jobs
           WHERE id = $1
           RETURNING id""",
        [job_id],
    )
    if not rows:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
