class BaseException(Exception):
    pass


class ValidationError(BaseException):
    @property
    def message(self):
        return str(self)


class NotFound(BaseException):
    message = "Cant find the requested resource"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingService(BaseException):
    message = "Missing required service"
