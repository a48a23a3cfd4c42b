from pydantic import BaseModel


class HomeIndexModel(BaseModel):
    activities: list[str]
