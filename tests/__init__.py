"""Test suite for the validation package.

Test structure:
- unit/: Unit tests - pure validators, registry, adapters and wiring
- utils/: Test data helpers (ULID timestamp encoding, random handles)
"""
