"""Exceptions raised by the note storage and presentation layers."""


class NotesError(Exception):
    """Base class for all QuickNotes errors."""


class PageNotFoundError(NotesError):
    """A page title is not addressable, or its file is missing or unreadable."""

    def __init__(self, title: str):
        super().__init__(f"Page not found: {title!r}")
        self.title = title


class ValidationError(NotesError):
    """A submitted title was rejected before reaching the store."""


class EmptyTitleError(ValidationError):
    def __init__(self):
        super().__init__("Title is required")


class InvalidTitleError(ValidationError):
    def __init__(self, title: str):
        super().__init__("Title may only contain letters and digits")
        self.title = title


class PageStorageError(NotesError):
    """The notes directory could not be created or a page could not be written."""

    def __init__(self, title: str, message: str):
        super().__init__(message)
        self.title = title


class RenderError(NotesError):
    """A template is missing, failed to parse, or failed to execute."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name
