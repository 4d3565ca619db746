# typed_json/infrastructure/__init__.py

"""Infrastructure components: decoder caching and synthesis configuration."""

# Local imports
from typed_json.infrastructure.cache import DecoderCache
from typed_json.infrastructure.config import AutoConfig

__all__ = ["AutoConfig", "DecoderCache"]
