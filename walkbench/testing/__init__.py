"""Test fixtures for walkbench consumers."""

from .fixtures import create_sample_tree, generate_tree, symlinks_supported

__all__ = ['create_sample_tree', 'generate_tree', 'symlinks_supported']
