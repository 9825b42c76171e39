"""
tests.unit
==========

Unit tests for the gasunit package, one module per source module.
"""
