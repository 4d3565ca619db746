# typed_json/infrastructure/cache/_registry.py

"""In-memory registry of synthesized decoders

Decoders are keyed by type name and never evicted: the set of types a
program decodes is fixed, so the registry stops growing after warm-up.
"""

# Standard library imports
from logging import getLogger
from threading import Lock
from typing import Callable

# Local imports
from typed_json.core.types.aliases import Decoder

logger = getLogger(__name__)


class DecoderCache:
    """Thread-safe get-or-create store for decoders

    The owner decides the lifetime; nothing here is global. A cache should
    only ever be filled from one synthesis configuration, since the key is the
    type name alone.
    """

    def __init__(self) -> None:
        self._decoders: dict[str, Decoder[object]] = {}
        self._lock = Lock()

    def get(self, type_name: str) -> Decoder[object] | None:
        with self._lock:
            return self._decoders.get(type_name)

    def get_or_add(
        self, type_name: str, factory: Callable[[], Decoder[object]]
    ) -> Decoder[object]:
        """Return the cached decoder, creating it with ``factory`` on first use

        The factory runs at most once per name, even under concurrent first
        use. If it raises, nothing is stored and the exception propagates.

        Args:
            type_name: Cache key
            factory: Builds the decoder when missing

        Returns:
            The decoder stored under ``type_name``
        """
        with self._lock:
            decoder = self._decoders.get(type_name)
            if decoder is not None:
                logger.debug(f"Decoder cache hit for {type_name}")
                return decoder

            decoder = factory()
            self._decoders[type_name] = decoder
            logger.debug(f"Cached decoder for {type_name}")
            return decoder

    def clear(self) -> None:
        with self._lock:
            self._decoders.clear()

    def __contains__(self, type_name: object) -> bool:
        with self._lock:
            return type_name in self._decoders

    def __len__(self) -> int:
        with self._lock:
            return len(self._decoders)
