from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from attendance_api.core.logger import get_logger
from attendance_api.db.database import get_db
from attendance_api.db.models import Student
from attendance_api.schemas.student import (
    CreateStudentSchema,
    DeletedStudentSchema,
    StudentSchema,
    UpdateStudentSchema,
)

router = APIRouter(prefix="/students", tags=["Students"])

log = get_logger("students")


@router.get("", response_model=list[StudentSchema])
async def list_students(db: AsyncSession = Depends(get_db)):
    try:
        result = await db.scalars(select(Student).order_by(Student.student_id.asc()))
        return result.all()
    except SQLAlchemyError as exc:
        log.exception("Listing students failed")
        raise HTTPException(status_code=500, detail="Database query failed") from exc


@router.post("", response_model=StudentSchema, status_code=201)
async def create_student(data: CreateStudentSchema, db: AsyncSession = Depends(get_db)):
    student = Student(name=data.name, roll_number=data.roll_number)
    try:
        db.add(student)
        await db.commit()
        await db.refresh(student)
    except SQLAlchemyError as exc:
        log.exception("Adding student failed")
        raise HTTPException(status_code=500, detail="Failed to add student") from exc
    return student


@router.put("/{student_id}", response_model=StudentSchema)
async def update_student(
    student_id: int,
    data: Optional[UpdateStudentSchema] = None,
    db: AsyncSession = Depends(get_db),
):
    """Write only the fields present in the body; omitted fields keep their values."""
    changes = data.model_dump(exclude_unset=True) if data else {}
    try:
        student = await db.get(Student, student_id)
        if not student:
            raise HTTPException(status_code=404, detail="Student not found")

        for field, value in changes.items():
            setattr(student, field, value)

        await db.commit()
        await db.refresh(student)
    except SQLAlchemyError as exc:
        log.exception("Updating student %s failed", student_id)
        raise HTTPException(status_code=500, detail="Failed to update student") from exc
    return student


@router.delete("/{student_id}", response_model=DeletedStudentSchema)
async def delete_student(student_id: int, db: AsyncSession = Depends(get_db)):
    try:
        student = await db.get(Student, student_id)
        if not student:
            raise HTTPException(status_code=404, detail="Student not found")

        deleted = StudentSchema.model_validate(student)
        # attendance rows go with it (ON DELETE CASCADE)
        await db.delete(student)
        await db.commit()
    except SQLAlchemyError as exc:
        log.exception("Deleting student %s failed", student_id)
        raise HTTPException(status_code=500, detail="Failed to delete student") from exc

    return {"message": "Student deleted successfully", "deleted": deleted}
