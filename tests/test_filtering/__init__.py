"""
Unit tests for the filtering module.

This package contains unit tests for the temperature window and the
filter engine of the PCM catalog.
"""
