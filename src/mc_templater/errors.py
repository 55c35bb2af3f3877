class TemplateError(Exception):
    pass


class MalformedTemplateError(TemplateError, ValueError):
    """Raised when template text cannot be turned into a usable grid."""

    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class UnknownDirectionError(TemplateError, ValueError):
    pass
