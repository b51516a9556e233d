from pydantic import BaseModel, ConfigDict, Field, StrictStr
from datetime import datetime


class ContactSubmitRequest(BaseModel):
    name: StrictStr = Field(min_length=1)
    email: StrictStr = Field(min_length=1)
    message: StrictStr = Field(min_length=1)

class ContactMessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    email: str
    message: str
    created_at: datetime = Field(alias="createdAt")

class ContactSubmitResponse(BaseModel):
    success: bool = True
    message: str
    data: ContactMessageResponse

class MessagesResponse(BaseModel):
    success: bool = True
    data: list[ContactMessageResponse]

class ErrorResponse(BaseModel):
    success: bool = False
    message: str
