class ImageResizerError(Exception):
    pass


class UnsupportedFormatError(ImageResizerError):
    pass


class InvalidFormatError(UnsupportedFormatError):
    pass


class DecodeError(ImageResizerError):
    pass


class InvalidColorError(ImageResizerError, ValueError):
    pass


class InvalidDimensionsError(ImageResizerError, ValueError):
    pass


class CodecUnavailableError(ImageResizerError):
    pass


class EncodeError(ImageResizerError):
    pass
