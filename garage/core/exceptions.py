from garage.core.enums import ErrorKind


class GarageError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GarageError):
    """Missing or unusable input. Nothing was written or sent."""
    kind = ErrorKind.VALIDATION


class StorageError(GarageError):
    """The write did not happen. Resubmitting is safe."""
    kind = ErrorKind.STORAGE


class NotificationError(GarageError):
    """The messaging gateway did not accept the message."""
    kind = ErrorKind.NOTIFICATION
