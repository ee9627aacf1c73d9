from pydantic import BaseModel


class Artist(BaseModel):
    id: str
    name: str
    role: str | None = None
    bio: str | None = None
    specialties: list[str] = []
    experience: str | None = None
    image: str | None = None
    calendar_id: str | None = None
