"""Decode errors. All are ValueErrors so callers can catch them broadly."""


class IdpixError(ValueError):
    """Base class for every error raised while decoding an identifier."""


class MalformedIdentifier(IdpixError):
    """Identifier is not valid hex, or too short for the variant's fields."""


class DesignIndexOutOfBounds(IdpixError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f'Design index {index} is out of bounds for a catalog of {size} design(s).')


class MalformedTemplate(IdpixError):
    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f'Design {index} is malformed: {reason}')
