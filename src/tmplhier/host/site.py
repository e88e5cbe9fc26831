"""Static implementation of the site collaborator."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tmplhier.domain.content import QueriedObject


class StaticSite(BaseModel):
    """Answers site questions from fixed values.

    Attributes:
        queried: The content item being viewed, if any.
        show_on_front: ``"posts"`` for the latest-posts listing on the front,
            ``"page"`` for a static front page.
        custom_templates: Author-assigned templates keyed by content id.
    """

    model_config = {"frozen": True}

    queried: QueriedObject | None = None
    show_on_front: str = "posts"
    custom_templates: dict[int, str] = Field(default_factory=dict)

    def queried_object(self) -> QueriedObject | None:
        return self.queried

    def is_showing_latest_posts_on_front(self) -> bool:
        return self.show_on_front == "posts"

    def custom_template_for(self, object_id: int) -> str | None:
        return self.custom_templates.get(object_id) or None
