from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from attendance_api.core.logger import get_logger
from attendance_api.db.database import get_db
from attendance_api.db.models import Attendance, Student
from attendance_api.schemas.attendance import (
    AttendanceRowSchema,
    AttendanceSchema,
    DeletedAttendanceSchema,
    MarkAttendanceSchema,
    UpdateAttendanceSchema,
)

router = APIRouter(prefix="/attendance", tags=["Attendance"])

log = get_logger("attendance")


@router.get("", response_model=list[AttendanceRowSchema])
async def list_attendance(db: AsyncSession = Depends(get_db)):
    query = (
        select(
            Attendance.attendance_id,
            Student.name,
            Student.roll_number,
            Attendance.date,
            Attendance.status,
        )
        .join(Student, Attendance.student_id == Student.student_id)
        .order_by(Attendance.date.desc())
    )
    try:
        result = await db.execute(query)
        return [dict(row) for row in result.mappings()]
    except SQLAlchemyError as exc:
        log.exception("Listing attendance failed")
        raise HTTPException(status_code=500, detail="Database query failed") from exc


@router.post("", response_model=AttendanceSchema, status_code=201)
async def mark_attendance(data: MarkAttendanceSchema, db: AsyncSession = Depends(get_db)):
    record = Attendance(student_id=data.student_id, date=data.date, status=data.status)
    try:
        db.add(record)
        await db.commit()
        await db.refresh(record)
    except SQLAlchemyError as exc:
        # unknown student_id lands here as a foreign key violation
        log.exception("Marking attendance for student %s failed", data.student_id)
        raise HTTPException(status_code=500, detail="Failed to mark attendance") from exc
    return record


@router.put("/{attendance_id}", response_model=AttendanceSchema)
async def update_attendance(
    attendance_id: int,
    data: Optional[UpdateAttendanceSchema] = None,
    db: AsyncSession = Depends(get_db),
):
    changes = data.model_dump(exclude_unset=True) if data else {}
    try:
        record = await db.get(Attendance, attendance_id)
        if not record:
            raise HTTPException(status_code=404, detail="Attendance record not found")

        if "status" in changes:
            record.status = changes["status"]

        await db.commit()
        await db.refresh(record)
    except SQLAlchemyError as exc:
        log.exception("Updating attendance %s failed", attendance_id)
        raise HTTPException(status_code=500, detail="Failed to update attendance") from exc
    return record


@router.delete("/{attendance_id}", response_model=DeletedAttendanceSchema)
async def delete_attendance(attendance_id: int, db: AsyncSession = Depends(get_db)):
    try:
        record = await db.get(Attendance, attendance_id)
        if not record:
            raise HTTPException(status_code=404, detail="Attendance record not found")

        deleted = AttendanceSchema.model_validate(record)
        await db.delete(record)
        await db.commit()
    except SQLAlchemyError as exc:
        log.exception("Deleting attendance %s failed", attendance_id)
        raise HTTPException(status_code=500, detail="Failed to delete attendance") from exc

    return {"message": "Attendance deleted successfully", "deleted": deleted}
