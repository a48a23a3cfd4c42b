from fastapi import APIRouter, Depends

from jobsearch.dependencies import get_activity_repository
from jobsearch.models import Activity
from jobsearch.repositories import SqlAlchemyRepository
from jobsearch.schemas.home import HomeIndexModel

router = APIRouter(tags=["home"])


def _describe(activity: Activity) -> str:
    status = "done" if activity.completed else "pending"
    return f"{activity.start:%Y-%m-%d %H:%M} {activity.description} ({activity.contact.name}, {status})"


@router.get("/", response_model=HomeIndexModel)
async def index(repository: SqlAlchemyRepository = Depends(get_activity_repository)):
    return HomeIndexModel(activities=[_describe(a) for a in repository.get_all()])
