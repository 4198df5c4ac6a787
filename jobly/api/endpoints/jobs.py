import logging
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.database import get_db
from jobly.core.deps import ensure_admin
from jobly.core.errors import BadRequestError, format_validation_errors
from jobly.crud import job as job_crud
from jobly.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobSearchFilters,
    JobEnvelope,
    JobDetailEnvelope,
    JobListEnvelope,
    JobDeleteResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def get_search_filters(request: Request) -> JobSearchFilters:
    """
    Build search filters from the query string.

    minSalary is coerced to an integer by the schema; hasEquity is true only
    for the literal "true", anything else (or absent) means no equity filter.

    Raises:
        BadRequestError: If the query does not validate
    """
    query = dict(request.query_params)
    query["hasEquity"] = query.get("hasEquity") == "true"

    try:
        return JobSearchFilters.model_validate(query)
    except ValidationError as e:
        raise BadRequestError(format_validation_errors(e.errors()))


@router.post(
    "",
    status_code=201,
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)]
)
def create_job(request: JobCreateRequest, db: Session = Depends(get_db)):
    """
    Create a new job posting.

    Body: { title, salary, equity, companyHandle }

    Authorization required: admin
    """
    try:
        job = job_crud.create(
            db,
            title=request.title,
            salary=request.salary,
            equity=request.equity,
            company_handle=request.company_handle,
        )
    except IntegrityError:
        db.rollback()
        logger.warning(f"Rejected job for unknown company {request.company_handle}")
        raise BadRequestError(f"No company: {request.company_handle}")

    return {"job": job}


@router.get("", response_model=JobListEnvelope)
def list_jobs(
    filters: JobSearchFilters = Depends(get_search_filters),
    db: Session = Depends(get_db)
):
    """
    List jobs ordered by title.

    Can filter on:
    - title (case-insensitive, partial match)
    - minSalary (inclusive)
    - hasEquity (true keeps only jobs with equity > 0)

    Authorization required: none
    """
    return {"jobs": job_crud.find_all(db, filters)}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID, with its company { handle, name, description,
    numEmployees, logoUrl } in place of companyHandle.

    Authorization required: none
    """
    return {"job": job_crud.get(db, job_id)}


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    dependencies=[Depends(ensure_admin)]
)
def update_job(job_id: int, request: JobUpdateRequest, db: Session = Depends(get_db)):
    """
    Patch a job. Fields can be: { title, salary, equity }

    Authorization required: admin
    """
    job = job_crud.update(db, job_id, request.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete(
    "/{job_id}",
    response_model=JobDeleteResponse,
    dependencies=[Depends(ensure_admin)]
)
def delete_job(job_id: int, db: Session = Depends(get_db)):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    return {"deleted": job_id}
