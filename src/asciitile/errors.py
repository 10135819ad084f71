class AsciiTileError(Exception):
    """Base class for errors raised by the rendering core."""


class BoundaryExceeded(AsciiTileError):
    def __init__(self, message: str = "Did not change resolution due to exceeding boundaries"):
        super().__init__(message)


class EmptyIndex(AsciiTileError, LookupError):
    def __init__(self, message: str = "Did not execute. Charset is empty."):
        super().__init__(message)


class ImageLoadError(AsciiTileError):
    def __init__(self, path, reason: str = ""):
        self.path = path
        message = "Did not execute due to problem with image file."
        if reason:
            message = f"{message} ({path}: {reason})"
        super().__init__(message)
