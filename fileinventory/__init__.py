"""Inventory JPEG and PDF files by magic number and content hash."""

__version__ = "0.1.0"
