# typed_json/core/domain/exceptions.py

"""Exceptions raised outside of the result-passing protocol"""


class DecoderGenerationError(TypeError):
    """No decoder can be synthesized for a type

    This is a programming error (missing extra decoder), reported when the
    decoder is built rather than when data is decoded.
    """

    def __init__(self, type_name: str):
        super().__init__(
            f"Cannot generate auto decoder for {type_name}. Please pass an extra decoder."
        )
        self.type_name = type_name


class DecodingError(ValueError):
    """Raised by the unsafe runners with the rendered failure message"""


__all__ = ["DecoderGenerationError", "DecodingError"]
