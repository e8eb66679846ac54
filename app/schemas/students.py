# app/schemas/students.py
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

class StudentPayload(BaseModel):
    """Caller-editable fields, used for both create and full-replacement update."""
    name: str
    email: str
    age: str
    hobby: str

class StudentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: str
    hobby: str
    created_at: int
    updated_at: Optional[int] = None   # null until the first update

class NotFound(BaseModel):
    msg: str

class Ok(BaseModel):
    value: StudentOut

class Err(BaseModel):
    error: NotFound

StudentResult = Union[Ok, Err]

class ErrorOut(BaseModel):
    detail: str
    kind: Optional[str] = Field(default=None, examples=["NotFound"])
