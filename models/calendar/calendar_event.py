from pydantic import AwareDatetime, BaseModel


AVAILABLE_LABEL = "Available"


class CalendarEvent(BaseModel):
    start: AwareDatetime
    end: AwareDatetime
    label: str  # "Available" opens a window, anything else is busy

    @property
    def is_availability_window(self) -> bool:
        return self.label == AVAILABLE_LABEL
