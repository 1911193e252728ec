"""Merge a directory of JSON Schema documents into one draft-07 document."""
