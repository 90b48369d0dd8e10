class ServiceError(Exception):
    status_code = 500

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        self.message = message or code
        super().__init__(self.message)


class ValidationError(ServiceError):
    status_code = 400


class DuplicateEmailError(ServiceError):
    status_code = 400


class UnauthorizedError(ServiceError):
    status_code = 401


class PermissionDeniedError(ServiceError):
    status_code = 403


class NotFoundError(ServiceError):
    status_code = 404


class AlreadyRegisteredError(ServiceError):
    status_code = 400


class CapacityReachedError(ServiceError):
    status_code = 400
