"""Errors raised while dispatching a query to a provider"""


class DispatchError(Exception):
    """Base error; rendered to the caller as `{"message": ...}`."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(DispatchError):
    """Missing input or an unknown platform."""

    status_code = 400


class UpstreamError(DispatchError):
    """Missing credential, failed upstream call or unusable upstream reply."""

    status_code = 500
