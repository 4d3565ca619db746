# typed_json/infrastructure/config/_models.py

"""Pydantic models for decoder synthesis settings"""

# Standard library imports
from typing import Callable

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from typed_json.shared.utils.type_utils import type_name


class AutoConfig(BaseModel):
    """Settings for one synthesis pass

    Frozen: build it once and hand it down; use ``with_extra`` to derive a
    variant with another user decoder.
    """

    model_config = ConfigDict(frozen=True)

    camel_case: bool = Field(
        False, description="Use lowerCamelCase JSON keys for record field names"
    )
    extra: dict[str, Callable[[object], object]] = Field(
        default_factory=dict,
        description="User decoders keyed by fully-qualified type name, consulted first",
    )

    def with_extra(self, target: object, decoder: Callable[[object], object]) -> "AutoConfig":
        """Return a copy that decodes ``target`` with ``decoder``

        Args:
            target: Type the decoder is for
            decoder: Decoder to use for every occurrence of ``target``

        Returns:
            New configuration; this one is left unchanged
        """
        return self.model_copy(update={"extra": {**self.extra, type_name(target): decoder}})

    def decoder_for(self, name: str) -> Callable[[object], object] | None:
        """User decoder registered for a type name, if any"""
        return self.extra.get(name)
