"""Structural patterns - composing classes and objects into larger structures."""
