# app/services/student_directory.py
from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.students import MAX_STORABLE_ID
from app.repositories import students_repo
from app.schemas.students import Err, NotFound, Ok, StudentOut, StudentPayload, StudentResult

logger = logging.getLogger(__name__)


def not_found(student_id: int) -> Err:
    return Err(error=NotFound(msg=f"Student with id={student_id} not found"))


class StudentDirectory:
    """
    Owns the set of Student records.

    Every operation runs in its own session and transaction. Writes are
    serialized through one lock; reads never take it. Missing records come
    back as ``Err(NotFound)`` values, not exceptions.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Callable[[], int] = time.time_ns,
    ):
        self._session_factory = session_factory
        self._clock = clock
        self._write_lock = asyncio.Lock()

    @staticmethod
    def _storable(student_id: int) -> bool:
        return 0 <= student_id <= MAX_STORABLE_ID

    # ---------- commands ----------
    async def add_student(self, payload: StudentPayload) -> Optional[StudentOut]:
        async with self._write_lock:
            try:
                async with self._session_factory() as session, session.begin():
                    student = await students_repo.insert_student(session, payload, created_at=self._clock())
                    out = StudentOut.model_validate(student)
            except SQLAlchemyError:
                logger.exception("add_student failed; no record created")
                return None

        logger.info("student created id=%s", out.id)
        return out

    async def update_student(self, student_id: int, payload: StudentPayload) -> StudentResult:
        if not self._storable(student_id):
            return not_found(student_id)

        async with self._write_lock:
            async with self._session_factory() as session, session.begin():
                student = await students_repo.find_student(session, student_id)
                if student is None:
                    logger.debug("update_student miss id=%s", student_id)
                    return not_found(student_id)
                # updated_at never precedes created_at, even if the clock stepped back
                updated_at = max(self._clock(), student.created_at)
                student = await students_repo.overwrite_student(session, student, payload, updated_at)
                out = StudentOut.model_validate(student)

        logger.info("student updated id=%s", student_id)
        return Ok(value=out)

    async def delete_student(self, student_id: int) -> StudentResult:
        if not self._storable(student_id):
            return not_found(student_id)

        async with self._write_lock:
            async with self._session_factory() as session, session.begin():
                student = await students_repo.find_student(session, student_id)
                if student is None:
                    logger.debug("delete_student miss id=%s", student_id)
                    return not_found(student_id)
                out = StudentOut.model_validate(student)
                await students_repo.remove_student(session, student)

        logger.info("student deleted id=%s", student_id)
        return Ok(value=out)

    # ---------- queries ----------
    async def get_student(self, student_id: int) -> StudentResult:
        if not self._storable(student_id):
            return not_found(student_id)

        async with self._session_factory() as session:
            student = await students_repo.find_student(session, student_id)
            if student is None:
                logger.debug("get_student miss id=%s", student_id)
                return not_found(student_id)
            return Ok(value=StudentOut.model_validate(student))

    async def list_students(self) -> List[StudentOut]:
        async with self._session_factory() as session:
            return [StudentOut.model_validate(s) for s in await students_repo.all_students(session)]

    async def count(self) -> int:
        async with self._session_factory() as session:
            return await students_repo.count_students(session)
