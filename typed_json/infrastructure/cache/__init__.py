# typed_json/infrastructure/cache/__init__.py

"""Cache of synthesized decoders.

Synthesizing a decoder walks a whole type graph; the cache lets every call
site after the first reuse the result.
"""

# Local imports
from typed_json.infrastructure.cache._registry import DecoderCache

__all__ = ["DecoderCache"]
