"""Domain protocols (ports).

Usage:
    from src.domain.protocols import LoggerProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
