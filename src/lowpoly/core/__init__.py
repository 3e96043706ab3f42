"""
Core value types, mathematical primitives, and serialization contracts.

Everything here is pure computation over immutable values: no I/O apart
from reading the bundled JSON schema.
"""
