from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    place_index: str
    region: str
    results: int
