from app.models.students import Student

__all__ = ["Student"]
