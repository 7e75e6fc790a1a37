"""
Chunkline

Separator-aware text chunking for embedding and indexing pipelines.
"""

__version__ = "0.1.0"
