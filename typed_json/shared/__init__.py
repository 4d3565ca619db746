# typed_json/shared/__init__.py
