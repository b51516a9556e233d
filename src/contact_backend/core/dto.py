from pydantic import BaseModel, ConfigDict
from datetime import datetime

class ContactMessageDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    message: str
    created_at: datetime
