from violet.schemas.error import ErrorResponse

__all__ = ["ErrorResponse"]
