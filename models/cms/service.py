from pydantic import BaseModel


class Service(BaseModel):
    id: str
    title: str
    slug: str
    price: float = 0.0
    duration: int | None = None  # Minutes
    description: str = ""
    featured: bool = False
