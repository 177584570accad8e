"""Convert static HTML markup into JSX."""

from .converter import convert

__all__ = ["convert"]
