"""
Core utilities: exceptions, codecs, validation, logging and paths.
"""
