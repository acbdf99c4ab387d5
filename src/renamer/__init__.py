"""Batch renaming of named entity trees."""
