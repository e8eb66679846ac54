# app/dependencies.py
from fastapi import Request

from app.services.student_directory import StudentDirectory


def get_directory(request: Request) -> StudentDirectory:
    # created in app.main.lifespan
    return request.app.state.directory
