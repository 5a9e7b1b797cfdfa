class DocumentServiceError(Exception):
    """Base error rendered as a failure envelope by the API."""

    kind = "InternalError"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoFileUploaded(DocumentServiceError):
    kind = "NoFileUploaded"
    status_code = 400


class InvalidRequest(DocumentServiceError):
    kind = "InvalidRequest"
    status_code = 400


class InvalidFileType(DocumentServiceError):
    kind = "InvalidFileType"
    status_code = 400


class FileTooLarge(DocumentServiceError):
    kind = "FileTooLarge"
    status_code = 400


class ExtractionFailed(DocumentServiceError):
    """Raised when the .docx cannot be turned into text."""

    kind = "ExtractionFailed"
    status_code = 500


class DocumentNotFound(DocumentServiceError):
    kind = "DocumentNotFound"
    status_code = 404


class DeletionFailed(DocumentServiceError):
    kind = "DeletionFailed"
    status_code = 500


class SchemaUnavailable(DocumentServiceError):
    kind = "SchemaUnavailable"
    status_code = 500


class InternalError(DocumentServiceError):
    kind = "InternalError"
    status_code = 500
