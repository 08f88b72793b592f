"""
Configuration for schema document loading and parsing.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Configuration options for loading and parsing schema documents."""

    # Timeout in seconds for HTTP fetches
    http_timeout: float = 30

    # Encoding used when reading schema files
    encoding: str = "utf-8"

    # Whether to fail on $ref chains that lead back to themselves
    detect_reference_cycles: bool = True

    @staticmethod
    def from_dict(d: dict) -> ParserConfig:
        """Create a config from a dictionary."""
        config = ParserConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "http_timeout": self.http_timeout,
            "encoding": self.encoding,
            "detect_reference_cycles": self.detect_reference_cycles,
        }
