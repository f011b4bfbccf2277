import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict


class MarkAttendanceSchema(BaseModel):
    student_id: int
    date: dt.date
    status: str


class UpdateAttendanceSchema(BaseModel):
    status: Optional[str] = None


class AttendanceSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    attendance_id: int
    student_id: int
    date: dt.date
    status: str


class AttendanceRowSchema(BaseModel):
    """One attendance record joined with its student."""

    attendance_id: int
    name: str
    roll_number: str
    date: dt.date
    status: str


class DeletedAttendanceSchema(BaseModel):
    message: str
    deleted: AttendanceSchema
