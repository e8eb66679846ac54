# app/models/students.py
from typing import Optional

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Mapped, mapped_column
from app.db import Base

# BIGINT UNSIGNED on TiDB/MySQL; SQLite only auto-increments "INTEGER PRIMARY KEY"
StudentId = BigInteger().with_variant(mysql.BIGINT(unsigned=True), "mysql").with_variant(Integer, "sqlite")

# Largest id any supported backend can store (SQLite INTEGER is signed 64-bit)
MAX_STORABLE_ID = 2**63 - 1

class Student(Base):
    __tablename__ = "students"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(StudentId, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[str] = mapped_column(Text, nullable=False)
    hobby: Mapped[str] = mapped_column(Text, nullable=False)

    # nanoseconds since the epoch
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    updated_at: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

    def __repr__(self) -> str:
        return f"<Student id={self.id} email={self.email!r}>"
