from .todo_exceptions import MalformedRecordError, ValidationError

__all__ = ["MalformedRecordError", "ValidationError"]
