"""CLI package for the bookstore inventory"""
from .main import cli

__all__ = ['cli']
