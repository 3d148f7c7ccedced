"""Domain protocols - interfaces for parser implementations."""

from flagline.domain.protocols.parser import ArgumentParser

__all__ = ["ArgumentParser"]
