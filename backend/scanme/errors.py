class ClientInputError(Exception):
    """Bad upload from the caller. Rendered as HTTP 400 with `message` as the error."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoFileUploaded(ClientInputError):
    def __init__(self):
        super().__init__("No file uploaded")


class UnsupportedMediaType(ClientInputError):
    def __init__(self):
        super().__init__("Only PDF and TXT files supported")


class ExtractionTooShort(ClientInputError):
    def __init__(self):
        super().__init__("Could not extract text from file")


class FileTooLarge(ClientInputError):
    status_code = 413

    def __init__(self, limit_bytes: int):
        super().__init__("File too large")
        self.limit_bytes = limit_bytes


class ProviderError(Exception):
    """The AI provider call failed (network, auth, quota). Message is passed through verbatim."""
