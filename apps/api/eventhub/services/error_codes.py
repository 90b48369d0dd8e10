from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    NO_TOKEN = "NO_TOKEN"
    TOKEN_FAILED = "TOKEN_FAILED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    CAPACITY_REACHED = "CAPACITY_REACHED"

    INTERNAL_ERROR = "INTERNAL_ERROR"
