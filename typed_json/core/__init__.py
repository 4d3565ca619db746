# typed_json/core/__init__.py

"""Core types and error model"""
