"""CLI package for the Library Catalog"""
from .main import cli

__all__ = ['cli']
