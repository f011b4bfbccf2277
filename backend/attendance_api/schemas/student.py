from typing import Optional

from pydantic import BaseModel, ConfigDict


class CreateStudentSchema(BaseModel):
    name: str
    roll_number: str


class UpdateStudentSchema(BaseModel):
    name: Optional[str] = None
    roll_number: Optional[str] = None


class StudentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    student_id: int
    name: str
    roll_number: str


class DeletedStudentSchema(BaseModel):
    message: str
    deleted: StudentSchema
