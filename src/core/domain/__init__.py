"""Domain models and value types.

Why:
- Plain, strict data structures (Pydantic v2 / enums) for one invocation.
- The domain knows nothing about typer, rich or the filesystem.
"""
