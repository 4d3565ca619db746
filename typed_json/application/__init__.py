# typed_json/application/__init__.py

"""Application layer: hand-written decoders and automatic synthesis"""
