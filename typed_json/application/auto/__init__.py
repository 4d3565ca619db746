# typed_json/application/auto/__init__.py

"""Decoders derived from type descriptors"""

# Local imports
from typed_json.application.auto._auto import AutoDecoder
from typed_json.application.auto._auto import auto_from_string
from typed_json.application.auto._auto import generate_decoder
from typed_json.application.auto._synthesizer import DecoderSynthesizer

__all__ = ["AutoDecoder", "DecoderSynthesizer", "auto_from_string", "generate_decoder"]
