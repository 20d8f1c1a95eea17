class BlockConverterError(Exception):
    """Base exception for all converter errors."""
    pass

class UnsupportedExtensionError(BlockConverterError):
    pass

class ConversionFailedError(BlockConverterError):
    pass

class DecodeError(BlockConverterError):
    """Stored value is not a readable block document."""
    pass

class ValidationError(BlockConverterError):
    """A block payload is missing fields or has the wrong shape."""
    pass
