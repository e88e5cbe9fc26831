"""Pure template-name helpers.

Template names are plain strings such as ``single-book.php`` or
``templates/custom.php``. Nothing here touches the filesystem.
"""

from __future__ import annotations

DEFAULT_VIEWS_PATH = "resources/views"


def strip_extension(name: str) -> str:
    """Drop everything from the last ``.`` onwards.

    ``"single-post.php"`` becomes ``"single-post"``; a name without a dot is
    returned unchanged.
    """
    head, dot, _ext = name.rpartition(".")
    return head if dot else name


def filter_templates(candidates: list[str], views_path: str = DEFAULT_VIEWS_PATH) -> list[str]:
    """Re-root every candidate under *views_path*.

    Names that already carry the prefix are not prefixed twice. The check is
    a plain string prefix, so ``resources/views-old/a.php`` counts as prefixed
    and becomes ``resources/views/-old/a.php``. Order and
    length are preserved. An empty *views_path* leaves the list as-is.
    """
    path = views_path.strip("/")
    if not path:
        return list(candidates)

    rooted: list[str] = []
    for name in candidates:
        relative = name.replace(path, "", 1) if name.lstrip("/").startswith(path) else name
        rooted.append(f"{path}/{relative.lstrip('/')}")
    return rooted
