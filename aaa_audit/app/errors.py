class AppError(Exception):
    """Base application error"""


class ConfigError(AppError):
    """Missing or invalid configuration"""


class DatabaseError(AppError):
    """MongoDB connection or query failure"""


class InvalidRequestError(AppError):
    """Request is missing a required field or carries an unusable value"""


class InvalidColorError(InvalidRequestError):
    """Color string is not a recognised hex or CSS color"""


class FileTooLargeError(InvalidRequestError):
    """Uploaded file exceeds the configured size limit"""


class UnsupportedMediaError(InvalidRequestError):
    """Uploaded file has a MIME type the endpoint does not accept"""


class NotFoundError(AppError):
    """Requested resource does not exist"""


class IssueNotFoundError(NotFoundError):
    """Issue ID not present in the analysed document"""


class ReportNotFoundError(NotFoundError):
    """Content hash not found in report storage"""


class ServiceUnavailableError(AppError):
    """Optional backend (report storage) is not configured"""


class ProviderError(AppError):
    """LLM / vision provider call failed"""


class AuditExecutionError(AppError):
    """Audit graph execution failure"""
