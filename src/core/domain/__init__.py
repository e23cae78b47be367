"""Domain models and rules.

Why:
- Pure data structures and validation rules (Pydantic v2, regex).
- The domain knows nothing about files, terminals or the CLI.
"""
