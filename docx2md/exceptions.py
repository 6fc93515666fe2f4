"""Custom exceptions for docx2md."""


class Docx2mdError(Exception):
    """Base exception for docx2md operations."""


class ArchiveError(Docx2mdError):
    """The DOCX package could not be opened or read."""


class IncorrectDocumentError(ArchiveError):
    """The package has no main document part."""

    def __init__(self, message='incorrect document'):
        super().__init__(message)


class DocumentParseError(Docx2mdError):
    """A document, relationships or styles part is not well-formed XML."""


class ResourceError(Docx2mdError):
    """An embedded resource could not be read or written to disk."""
