from pydantic import BaseModel


class TimeSlotsResponse(BaseModel):
    time_slots: list[str]
