# typed_json/infrastructure/config/__init__.py

"""Configuration for automatic decoder synthesis"""

# Local imports
from typed_json.infrastructure.config._models import AutoConfig

__all__ = ["AutoConfig"]
