"""Behavioral patterns - algorithms and the assignment of responsibilities."""
