# literatejs/utils/language.py
from ..config import (
    DEFAULT_FENCE_TAG,
    DEFAULT_SOURCE_TYPE,
    FENCE_TAGS,
    JSX_EXTENSIONS,
    MODULE_EXTENSIONS,
)


def _extension(file_path: str) -> str:
    name = file_path.replace("\\", "/").split("/")[-1]
    if "." not in name:
        return ""
    return name.split(".")[-1].lower()


def _get_fence_tag_from_path(file_path: str) -> str:
    """Gets the fence info string for a source file, falling back to 'js'."""
    return FENCE_TAGS.get(_extension(file_path), DEFAULT_FENCE_TAG)


def _get_source_type_from_path(file_path: str) -> str:
    """'.mjs' files are always ES modules; everything else parses as a script."""
    if _extension(file_path) in MODULE_EXTENSIONS:
        return "module"
    return DEFAULT_SOURCE_TYPE


def _is_jsx_path(file_path: str) -> bool:
    return _extension(file_path) in JSX_EXTENSIONS
