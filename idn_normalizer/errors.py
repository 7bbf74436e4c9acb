# idn_normalizer/errors.py


class IdnNormalizerError(Exception):
    """Base exception for URL normalization errors"""
    pass


class InvalidUrlError(IdnNormalizerError, ValueError):
    """Raised when the input does not parse as a URL"""
    pass


class IdnConversionError(IdnNormalizerError, ValueError):
    """Raised when a host cannot be encoded to its ASCII (Punycode) form"""

    def __init__(self, message: str, host: str = ""):
        super().__init__(message)
        self.host = host
