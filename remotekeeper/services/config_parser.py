"""Parser for `rclone config show <name>` output.

A healthy remote dumps as an INI-style section::

    [backup1]
    type = s3
    access_key_id = AKIA...

When rclone cannot load the remote it prints only ``#`` comment lines under
the header, which is how an error state is told apart from a config.
"""

from __future__ import annotations

import re

from .remote_types import RemoteResult, fail, ok

_SECTION_RE = re.compile(r"^\[(?P<name>.*)\]$")
_KEY_VALUE_DELIMITER = " = "


def parse_config_show(text: str) -> RemoteResult[dict[str, str]]:
    """Parse a config dump into a key/value mapping or an error message.

    Values keep every `` = `` after the first one, so base64 and JWT-like
    tokens survive intact. The result is an error only when at least one
    config line exists and every config line is a ``#`` comment.
    """
    parsed: dict[str, str] = {}
    config_lines: list[str] = []
    error_lines: list[str] = []

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        section = _SECTION_RE.match(line)
        if section:
            parsed["name"] = section.group("name")
            continue

        config_lines.append(line)

        if line.startswith("#"):
            error_lines.append(line.lstrip("#").strip())
            continue

        if _KEY_VALUE_DELIMITER in line:
            key, *value_parts = line.split(_KEY_VALUE_DELIMITER)
            key = key.strip()
            if key:
                parsed[key] = _KEY_VALUE_DELIMITER.join(value_parts).strip()

    if config_lines and all(line.startswith("#") for line in config_lines):
        return fail(" ".join(error_lines))

    return ok(parsed)
