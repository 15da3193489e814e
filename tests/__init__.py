"""
Test suite for collectkit

Contains:
- tests/unit/          : Unit tests for maps, slicex, funcs and core config
"""
