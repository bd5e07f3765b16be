"""Creational patterns - object creation mechanisms."""
