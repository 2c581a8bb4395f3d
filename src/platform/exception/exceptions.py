class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainError(CustomBaseError):
    pass


class NotFoundError(CustomBaseError):
    pass


class ConflictError(CustomBaseError):
    pass
