"""The queried content item a page view is about."""

from __future__ import annotations

from urllib.parse import unquote

from pydantic import BaseModel


class QueriedObject(BaseModel):
    """Read-only view of the post, page, or term being rendered.

    ``content_type`` is the post type for singular views and the taxonomy
    name for term archives. It is used verbatim in template names.
    """

    model_config = {"frozen": True}

    id: int
    content_type: str = "post"
    slug: str = ""

    @property
    def decoded_slug(self) -> str:
        """The slug with percent-encoding removed."""
        return unquote(self.slug)
