"""
Defaults shared by the library and the CLI.

Everything here can be overridden per call through keyword arguments; no
configuration file or environment variable is read.
"""
from typing import Dict

DEFAULT_FENCE_TAG = "js"
DEFAULT_SOURCE_TYPE = "script"
DEFAULT_ENCODING = "utf-8"

SOURCE_TYPES = ("script", "module")

# File extension -> info string for the opening fence.
FENCE_TAGS: Dict[str, str] = {
    "js": "js",
    "cjs": "js",
    "mjs": "js",
    "jsx": "jsx",
}

MODULE_EXTENSIONS = ("mjs",)
JSX_EXTENSIONS = ("jsx",)
