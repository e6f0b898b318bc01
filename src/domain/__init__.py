"""Domain layer - Pure validation rules.

This layer contains the validators, the value objects they check, the
annotated Pydantic types built on top of them, and the logging protocol
(port). The domain layer has NO dependencies on infrastructure - validators
are pure functions returning Result types.

Structure:
- validators/: One module per input kind, plus the rules registry
- value_objects/: Value objects (immutable, no identity)
- protocols/: Domain protocols (logger interface)
- types.py: Annotated types for Pydantic models

The domain layer defines WHAT is valid, not HOW callers react to it.
"""
