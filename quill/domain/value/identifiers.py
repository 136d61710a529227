"""Typed identifiers for blog domain entities.

Post slugs come from the CMS and comment ids are time-derived strings, so
both are plain strings wrapped in NewType to keep them from being mixed up.
"""

from typing import NewType

PostSlug = NewType("PostSlug", str)
CommentId = NewType("CommentId", str)
