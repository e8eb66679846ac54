from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.students import Student
from app.schemas.students import StudentPayload


async def insert_student(session: AsyncSession, payload: StudentPayload, created_at: int) -> Student:
    """
    Add a row and flush so the database assigns its id.
    The caller owns the transaction.
    """
    student = Student(
        name=payload.name,
        email=payload.email,
        age=payload.age,
        hobby=payload.hobby,
        created_at=created_at,
        updated_at=None,
    )
    session.add(student)
    await session.flush()
    return student


async def find_student(session: AsyncSession, student_id: int) -> Optional[Student]:
    result = await session.execute(select(Student).where(Student.id == student_id))
    return result.scalar_one_or_none()


async def overwrite_student(
    session: AsyncSession, student: Student, payload: StudentPayload, updated_at: int
) -> Student:
    student.name = payload.name
    student.email = payload.email
    student.age = payload.age
    student.hobby = payload.hobby
    student.updated_at = updated_at
    await session.flush()
    return student


async def remove_student(session: AsyncSession, student: Student) -> None:
    await session.delete(student)
    await session.flush()


async def all_students(session: AsyncSession) -> List[Student]:
    result = await session.execute(select(Student).order_by(Student.id.asc()))
    return list(result.scalars().all())


async def count_students(session: AsyncSession) -> int:
    return (await session.execute(select(func.count()).select_from(Student))).scalar_one()
