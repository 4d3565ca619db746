# typed_json/application/auto/_auto.py

"""Public entry points for automatic decoders"""

# Standard library imports
from logging import getLogger
from typing import Any

# Local imports
from typed_json.application.auto._synthesizer import DecoderSynthesizer
from typed_json.application.decoding._runners import from_string
from typed_json.application.decoding._runners import unsafe_from_string
from typed_json.core.types.aliases import Decoder
from typed_json.core.types.aliases import ExtraCoders
from typed_json.core.types.result import Result
from typed_json.infrastructure.cache import DecoderCache
from typed_json.infrastructure.config import AutoConfig
from typed_json.shared.utils.type_utils import type_name

logger = getLogger(__name__)


class AutoDecoder:
    """Synthesizes decoders from type descriptors under one configuration

    Cached decoders are keyed by type name only, so a cache handed in here
    should not be shared with an ``AutoDecoder`` using another configuration.

    Example:
        >>> auto = AutoDecoder(AutoConfig(camel_case=True))
        >>> auto.from_string(User, '{"userName": "ada"}')
    """

    def __init__(self, config: AutoConfig | None = None, cache: DecoderCache | None = None):
        self._config = config if config is not None else AutoConfig()
        self._cache = cache if cache is not None else DecoderCache()

    @property
    def config(self) -> AutoConfig:
        return self._config

    @property
    def cache(self) -> DecoderCache:
        return self._cache

    def generate_decoder(self, target: object) -> Decoder[Any]:
        """Build a decoder for ``target`` without touching the cache

        Raises:
            DecoderGenerationError: when some part of ``target`` has no decoder
        """
        logger.debug(f"Generating decoder for {type_name(target)}")
        return DecoderSynthesizer(self._config).synthesize(target)

    def generate_decoder_cached(self, target: object) -> Decoder[Any]:
        """Build a decoder for ``target`` once and reuse it afterwards"""
        return self._cache.get_or_add(type_name(target), lambda: self.generate_decoder(target))

    def from_string(self, target: object, text: str | bytes) -> Result[Any, str]:
        """Parse ``text`` and decode it as ``target`` using a cached decoder"""
        return from_string(self.generate_decoder_cached(target), text)

    def unsafe_from_string(self, target: object, text: str | bytes) -> Any:
        """Like ``from_string`` but raises ``DecodingError`` on failure"""
        return unsafe_from_string(self.generate_decoder_cached(target), text)


def generate_decoder(
    target: object,
    camel_case: bool = False,
    extra: ExtraCoders | None = None,
) -> Decoder[Any]:
    """Build an uncached decoder for ``target``

    Args:
        target: Type descriptor
        camel_case: Use lowerCamelCase JSON keys for record fields
        extra: User decoders keyed by fully-qualified type name

    Returns:
        Decoder for ``target``

    Raises:
        DecoderGenerationError: when some part of ``target`` has no decoder
    """
    config = AutoConfig(camel_case=camel_case, extra=extra or {})
    return AutoDecoder(config).generate_decoder(target)


def auto_from_string(
    target: object,
    text: str | bytes,
    camel_case: bool = False,
    extra: ExtraCoders | None = None,
) -> Result[Any, str]:
    """Parse ``text`` and decode it as ``target`` with a freshly built decoder"""
    return from_string(generate_decoder(target, camel_case, extra), text)


__all__ = ["AutoDecoder", "generate_decoder", "auto_from_string"]
