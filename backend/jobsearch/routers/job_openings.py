import logging

from fastapi import APIRouter, Depends, HTTPException

from jobsearch.dependencies import get_contact_repository, get_job_opening_repository
from jobsearch.errors import InvalidArgument
from jobsearch.models import Activity, Contact, JobOpening
from jobsearch.repositories import SqlAlchemyRepository
from jobsearch.routers.contacts import contact_to_response
from jobsearch.schemas.job_opening import (
    ActivityResponse,
    ApplyRequest,
    InterviewCreate,
    JobOpeningCreate,
    JobOpeningResponse,
)
from jobsearch.services import job_opening_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/job-openings", tags=["job openings"])


def activity_to_response(activity: Activity) -> ActivityResponse:
    return ActivityResponse(
        id=activity.id,
        start=activity.start,
        duration=activity.duration,
        description=activity.description,
        completed=activity.completed,
        contact=contact_to_response(activity.contact),
    )


def _job_opening_to_response(job_opening: JobOpening) -> JobOpeningResponse:
    return JobOpeningResponse(
        id=job_opening.id,
        title=job_opening.title,
        organization=job_opening.organization,
        url=job_opening.url,
        notes=job_opening.notes,
        advertised_date=job_opening.advertised_date,
        additional_contacts=[contact_to_response(c) for c in job_opening.additional_contacts],
        activities=[activity_to_response(a) for a in job_opening.activities],
    )


def _get_or_404(repository: SqlAlchemyRepository, item_id: int, label: str):
    item = repository.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return item


@router.post("", response_model=JobOpeningResponse, status_code=201)
async def create_job_opening(
    req: JobOpeningCreate,
    repository: SqlAlchemyRepository = Depends(get_job_opening_repository),
    contacts: SqlAlchemyRepository = Depends(get_contact_repository),
):
    additional_contacts: list[Contact] = [
        _get_or_404(contacts, contact_id, "Contact") for contact_id in req.additional_contact_ids
    ]
    job_opening = JobOpening(
        title=req.title,
        organization=req.organization,
        url=req.url,
        notes=req.notes,
        advertised_date=req.advertised_date,
        additional_contacts=additional_contacts,
    )
    repository.create(job_opening)
    repository.save()
    logger.info("Created job opening %s", job_opening.id)
    return _job_opening_to_response(job_opening)


@router.get("", response_model=list[JobOpeningResponse])
async def list_job_openings(repository: SqlAlchemyRepository = Depends(get_job_opening_repository)):
    return [_job_opening_to_response(j) for j in repository.get_all()]


@router.get("/{job_opening_id}", response_model=JobOpeningResponse)
async def get_job_opening(job_opening_id: int,
                          repository: SqlAlchemyRepository = Depends(get_job_opening_repository)):
    return _job_opening_to_response(_get_or_404(repository, job_opening_id, "Job opening"))


@router.delete("/{job_opening_id}")
async def delete_job_opening(job_opening_id: int,
                             repository: SqlAlchemyRepository = Depends(get_job_opening_repository)):
    _get_or_404(repository, job_opening_id, "Job opening")
    repository.delete(job_opening_id)
    repository.save()
    return {"message": "Job opening deleted"}


@router.post("/{job_opening_id}/apply", response_model=JobOpeningResponse, status_code=201)
async def apply_for_job_opening(
    job_opening_id: int,
    req: ApplyRequest,
    repository: SqlAlchemyRepository = Depends(get_job_opening_repository),
    contacts: SqlAlchemyRepository = Depends(get_contact_repository),
):
    job_opening = _get_or_404(repository, job_opening_id, "Job opening")
    contact = _get_or_404(contacts, req.contact_id, "Contact")

    job_opening_service.apply(job_opening, req.application_time, contact)
    repository.update(job_opening)
    repository.save()
    logger.info("Applied for job opening %s", job_opening_id)
    return _job_opening_to_response(job_opening)


@router.post("/{job_opening_id}/interviews", response_model=JobOpeningResponse, status_code=201)
async def add_interview(
    job_opening_id: int,
    req: InterviewCreate,
    repository: SqlAlchemyRepository = Depends(get_job_opening_repository),
    contacts: SqlAlchemyRepository = Depends(get_contact_repository),
):
    job_opening = _get_or_404(repository, job_opening_id, "Job opening")
    contact = _get_or_404(contacts, req.contact_id, "Contact")

    try:
        job_opening_service.add_interview(job_opening, req.start, req.duration, contact,
                                          req.description)
    except InvalidArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    repository.update(job_opening)
    repository.save()
    logger.info("Added interview to job opening %s", job_opening_id)
    return _job_opening_to_response(job_opening)
