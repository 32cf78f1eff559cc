class CacheFSError(Exception):
    """Base error for store operations"""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
        self.message = message


class NotFoundError(CacheFSError):
    def __init__(self, name: str):
        super().__init__(name, f"File not found: {name!r}")


class AlreadyExistsError(CacheFSError):
    def __init__(self, name: str):
        super().__init__(name, f"File already exists: {name!r}")
