import os
import re
import warnings
from functools import partial

from pydantic import AfterValidator


def warn_if_risky_node_name(path: str, field_name: str = "") -> str:
    """Warn if the given Zarr node name is potentially risky.

    "risky" names include characters outside of the set [A-Za-z0-9._-], which may
    cause issues on some filesystems or when used in URLs.  Path separators are
    allowed, since v0.4 paths may point into nested groups.

    set NGFFMETA_ALLOW_RISKY_NODE_NAMES=1 to opt out of this warning.
    """
    risky_chars = re.findall(r"[^A-Za-z0-9._/-]", path)
    if risky_chars and not os.getenv("NGFFMETA_ALLOW_RISKY_NODE_NAMES"):
        if field_name:
            for_field = f" on field '{field_name}'"
        else:
            for_field = ""
        warnings.warn(
            f"The name {path!r}{for_field} contains potentially risky characters when "
            f"used as a zarr node: {set(risky_chars)}.\nConsider using only "
            "alphanumeric characters, dots (.), underscores (_), or hyphens (-) to "
            "avoid issues on some filesystems or when used in URLs. "
            "Set NGFFMETA_ALLOW_RISKY_NODE_NAMES=1 to suppress this warning.",
            UserWarning,
            stacklevel=3,
        )
    return path


SuggestDatasetPath = AfterValidator(
    partial(warn_if_risky_node_name, field_name="Dataset.path")
)


def is_alphanumeric(name: str) -> bool:
    """Return True if every character of `name` is a letter or a digit.

    Unlike `str.isalnum`, the empty string counts as alphanumeric.  Characters
    are tested with `str.isalnum`, which rejects combining marks such as U+0345
    even where they carry the Unicode Alphabetic property.
    """
    return all(char.isalnum() for char in name)
