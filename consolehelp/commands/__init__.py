"""Command documentation utilities.

This package provides:
- models: Data structures (DocTag, DocComment, ActionParameter)
- parsing: Comment block and tag parsing, action id conversion
- discovery: Command and action enumeration
- options: Option tables built from docs and signatures
"""
