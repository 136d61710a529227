"""Contentful content source adapter."""

from .client import ContentfulPostRepository, plain_text

__all__ = ["ContentfulPostRepository", "plain_text"]
