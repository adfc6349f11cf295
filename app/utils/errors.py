class ServiceError(Exception):
    """Base error raised by services and rendered by controllers."""

    status = 400

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


class NotFoundError(ServiceError):
    status = 404


class ValidationFailed(ServiceError):
    status = 400
