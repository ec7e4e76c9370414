from pydantic import BaseModel
from typing import Optional, Any


class ErrorResponse(BaseModel):
    """
    Standard error response structure.

    Client errors carry `message`, server errors carry `error`.
    """
    ok: bool = False
    message: Optional[str] = None
    error: Optional[str] = None
    code: str
    details: Optional[Any] = None

    @classmethod
    def for_status(cls, status_code: int, text: str, code: str, details: Optional[Any] = None) -> "ErrorResponse":
        if status_code >= 500:
            return cls(error=text, code=code, details=details)
        return cls(message=text, code=code, details=details)

    def render(self) -> dict:
        return self.model_dump(exclude_none=True)
