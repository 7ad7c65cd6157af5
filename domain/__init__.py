"""Enumerations and value objects shared by the whole pipeline."""
