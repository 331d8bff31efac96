import httpx
from pydantic import ValidationError


class PrinterError(Exception):
    ...


class NetworkError(PrinterError):
    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url: str | None = url

    @staticmethod
    def from_http_error(err: httpx.HTTPError) -> "NetworkError":
        try:
            url = str(err.request.url)
        except RuntimeError:  # request is not attached to the error
            url = None

        if isinstance(err, httpx.HTTPStatusError):
            message = f"get error response, status code={err.response.status_code}"
        else:
            message = f"http request failed, error type={type(err).__name__}"

        return NetworkError(message, url=url)


class ParseError(PrinterError):
    @staticmethod
    def from_validation_error(err: ValidationError) -> "ParseError":
        return ParseError(
            f"cannot parse {err.title}, {err.error_count()} validation error(s)"
        )
