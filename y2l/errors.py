from typing import Dict


class ServiceError(Exception):
    http_status: int

    def __init__(self, message: str, http_status: int = 500):
        super().__init__(message)
        self.http_status = http_status

    def __str__(self) -> str:
        cause_str = f" # Caused by: {self.__cause__}" if self.__cause__ else ""
        return f"[{self.http_status}] {super().__str__()}{cause_str}"

    @property
    def public_message(self) -> str:
        return self.args[0] if self.args else ""

    def to_api_dict(self) -> Dict[str, str]:
        return {"error": self.public_message}


class InvalidUrlError(ServiceError):
    def __init__(self, message: str):
        super().__init__(message, http_status=400)


class UnauthorizedError(ServiceError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, http_status=401)


class ExtractionError(ServiceError):
    """yt-dlp could not be launched, failed, or produced unusable output."""

    def __init__(self, message: str, details: str = ""):
        super().__init__(message, http_status=500)
        self.details = details
