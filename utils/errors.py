"""
Errors Module - Exception taxonomy shared by the store, uploads and routes
Each exception carries the HTTP status code the API answers with.
"""


class PortfolioError(Exception):
    """Base class for all portfolio backend errors"""
    status_code = 500

    def __init__(self, message=None):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or self.__class__.__doc__

    def to_dict(self):
        return {'error': self.message}


class ValidationError(PortfolioError):
    """Invalid input"""
    status_code = 400


class NotFoundError(PortfolioError):
    """Resource not found"""
    status_code = 404


class StorageError(PortfolioError):
    """Storage failure"""
    status_code = 500


class StorageReadError(StorageError):
    """Failed to read projects"""


class StorageWriteError(StorageError):
    """Failed to write to storage"""
