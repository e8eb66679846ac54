# app/routers/students.py

# Create: POST   /api/v1/students
# List:   GET    /api/v1/students
# Get:    GET    /api/v1/students/{student_id}
# Update: PUT    /api/v1/students/{student_id}
# Delete: DELETE /api/v1/students/{student_id}
from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.dependencies import get_directory
from app.schemas.students import Err, ErrorOut, StudentOut, StudentPayload, StudentResult
from app.services.student_directory import StudentDirectory
from app.shared.errors import CreationFailedError, NotFoundError

router = APIRouter()

NAT64_MAX = 2**64 - 1

StudentIdPath = Path(..., ge=0, le=NAT64_MAX, description="Student id (unsigned 64-bit)")

_not_found = {404: {"model": ErrorOut, "description": "No student with this id"}}


def _unwrap(result: StudentResult) -> StudentOut:
    if isinstance(result, Err):
        raise NotFoundError(result.error.msg)
    return result.value


@router.post(
    "/students",
    response_model=StudentOut,
    status_code=status.HTTP_201_CREATED,
    responses={500: {"model": ErrorOut, "description": "Student could not be created"}},
)
async def add_student(payload: StudentPayload, directory: StudentDirectory = Depends(get_directory)):
    student = await directory.add_student(payload)
    if student is None:
        raise CreationFailedError("Student could not be created")
    return student


@router.get("/students", response_model=List[StudentOut])
async def list_students(directory: StudentDirectory = Depends(get_directory)):
    """
    Every student, oldest id first.
    """
    return await directory.list_students()


@router.get("/students/{student_id}", response_model=StudentOut, responses=_not_found)
async def get_student(student_id: int = StudentIdPath, directory: StudentDirectory = Depends(get_directory)):
    return _unwrap(await directory.get_student(student_id))


@router.put("/students/{student_id}", response_model=StudentOut, responses=_not_found)
async def update_student(
    payload: StudentPayload,
    student_id: int = StudentIdPath,
    directory: StudentDirectory = Depends(get_directory),
):
    """
    Full replacement of name, email, age and hobby; sets updated_at.
    """
    return _unwrap(await directory.update_student(student_id, payload))


@router.delete("/students/{student_id}", response_model=StudentOut, responses=_not_found)
async def delete_student(student_id: int = StudentIdPath, directory: StudentDirectory = Depends(get_directory)):
    """
    Removes the student and returns its last state.
    """
    return _unwrap(await directory.delete_student(student_id))
