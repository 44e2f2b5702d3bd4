from tailmerge.merge.imports import (
    add_import,
    find_insertion_point,
    import_exists,
    insert_at,
    insert_import,
    normalize_import_path,
)
from tailmerge.merge.overrides import apply_overrides, generate_css
from tailmerge.merge.theme import (
    add_import_and_theme,
    ensure_theme_exists,
    normalize_theme,
    read_theme_content,
)

__all__ = [
    "add_import",
    "add_import_and_theme",
    "apply_overrides",
    "ensure_theme_exists",
    "find_insertion_point",
    "generate_css",
    "import_exists",
    "insert_at",
    "insert_import",
    "normalize_import_path",
    "normalize_theme",
    "read_theme_content",
]
