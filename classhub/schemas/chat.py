from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ChatMessageCreate(BaseModel):
    username: Optional[str] = None
    message: Optional[str] = None


class ChatMessageOut(BaseModel):
    id: int
    username: Optional[str] = None
    message: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
