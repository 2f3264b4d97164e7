"""Shared building blocks: logging, errors and pagination."""
