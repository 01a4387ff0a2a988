"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by the CLI layer.
- The pipeline depends on the abstraction, never on rich directly.
"""
