"""Domain models and errors.

- Pure data structures (Pydantic v2) and the single domain error type.
- The domain knows nothing about HTTP clients, FastAPI or the CLI.
"""
