from typing import Any, Optional

class AppError(Exception):
    status_code: int = 400
    code: str = "APP_ERROR"

    def __init__(self, message: str, *, code: Optional[str] = None, status_code: Optional[int] = None,
                 details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code or self.code
        self.status_code = status_code or self.status_code
        self.message = message
        self.details = details

    def to_content(self) -> dict[str, Any]:
        content: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.details:
            content["details"] = self.details
        return content

class InputError(AppError):
    """Bài đăng gửi lên trống hoặc vượt quá MAX_TEXT_LENGTH."""
    code = "INPUT_ERROR"
    status_code = 400
