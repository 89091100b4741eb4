# literatejs/utils/__init__.py
from .language import _get_fence_tag_from_path, _get_source_type_from_path, _is_jsx_path
from .text import longest_backtick_run

__all__ = [
    "_get_fence_tag_from_path",
    "_get_source_type_from_path",
    "_is_jsx_path",
    "longest_backtick_run",
]
