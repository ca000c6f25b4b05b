# apps/domains/packages/models/__init__.py
from .package import Package

__all__ = ["Package"]
