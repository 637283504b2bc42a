"""Core interfaces.

- Structural contracts (Protocol) implemented by adapters.
- The core depends on these, never on `httpx` directly.
"""
