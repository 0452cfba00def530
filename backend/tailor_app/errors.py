from typing import Any, Dict, Optional


class TailorError(Exception):
    """Base failure carrying the message and HTTP status shown to the caller."""

    status_code = 500

    def __init__(self, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.detail}


class ValidationError(TailorError):
    status_code = 400


class ConfigurationError(TailorError):
    status_code = 500


class GenerationTimeoutError(TailorError):
    status_code = 504


class UpstreamError(TailorError):
    """Generation service unreachable, or it answered with a non-2xx status."""

    status_code = 504

    def __init__(self, detail: str, status_code: Optional[int] = None, body: Optional[str] = None) -> None:
        super().__init__(detail, status_code)
        self.body = body


class MalformedOutputError(TailorError):
    status_code = 502

    def __init__(self, detail: str, raw: str = "") -> None:
        super().__init__(detail)
        self.raw = raw

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.detail, "raw": self.raw}


class RenderError(TailorError):
    status_code = 500
