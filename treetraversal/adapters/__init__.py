"""Adapters for specific tree representations."""

from .mapping import MappingTree

__all__ = ['MappingTree']
