"""The host's own candidate lists, before any filter runs."""

from __future__ import annotations

from tmplhier.domain.content import QueriedObject
from tmplhier.domain.types import ViewType

# Types whose defaults never depend on the queried object.
_STATIC: dict[ViewType, list[str]] = {
    ViewType.NOT_FOUND: ["404.php"],
    ViewType.ATTACHMENT: ["attachment.php"],
    ViewType.DATE: ["date.php"],
    ViewType.EMBED: ["embed.php"],
    ViewType.FRONTPAGE: ["front-page.php"],
    ViewType.HOME: ["home.php", "index.php"],
    ViewType.INDEX: ["index.php"],
    ViewType.PAGED: ["paged.php"],
    ViewType.PRIVACY_POLICY: ["privacy-policy.php"],
    ViewType.SEARCH: ["search.php"],
    ViewType.SINGULAR: ["singular.php"],
}


def default_candidates(view_type: ViewType, obj: QueriedObject | None) -> list[str]:
    """Candidate list the host builds for *view_type*, most specific first."""
    if view_type in _STATIC:
        return list(_STATIC[view_type])

    templates: list[str] = []
    if view_type is ViewType.ARCHIVE:
        if obj is not None:
            templates.append(f"archive-{obj.content_type}.php")
        templates.append("archive.php")
    elif view_type is ViewType.SINGLE:
        if obj is not None:
            if obj.slug:
                templates.append(f"single-{obj.content_type}-{obj.decoded_slug}.php")
            templates.append(f"single-{obj.content_type}.php")
        templates.append("single.php")
    elif view_type is ViewType.TAXONOMY:
        if obj is not None:
            if obj.slug:
                templates.append(f"taxonomy-{obj.content_type}-{obj.decoded_slug}.php")
            templates.append(f"taxonomy-{obj.content_type}.php")
        templates.append("taxonomy.php")
    else:
        # page, category, tag, author: slug, then id, then the bare kind.
        kind = view_type.value
        if obj is not None:
            if obj.slug:
                templates.append(f"{kind}-{obj.decoded_slug}.php")
            templates.append(f"{kind}-{obj.id}.php")
        templates.append(f"{kind}.php")
    return templates
