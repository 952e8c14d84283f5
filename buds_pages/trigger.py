"""Extract directive text from CI trigger payloads.

Three trigger shapes are understood:

* ``issue_comment`` and ``issues`` events, whose comment or issue body must
  start with a slash command such as ``/deploy`` or ``/design``. The command
  token is stripped and the rest of the body is the directive.
* ``workflow_dispatch`` events, whose ``inputs.prompt`` holds the directive.
* A manually supplied prompt (``--prompt`` or ``INPUT_PROMPT``), which always
  takes precedence.

Anything else yields ``None`` so the caller skips the update step.

Examples
--------
>>> payload = {"comment": {"body": "/design purple; add faq"}}
>>> extract_directive("issue_comment", payload)
'purple; add faq'
>>> extract_directive("push", {}) is None
True
"""

from __future__ import annotations

import collections.abc as cabc
import json
import logging
import re
import typing as typ

from ._constants import DEFAULT_COMMANDS

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_BODY_FIELDS: dict[str, str] = {"issue_comment": "comment", "issues": "issue"}


def read_event(path: Path | None) -> dict[str, typ.Any] | None:
    """Return the JSON event payload at ``path``, or None when unusable."""
    if path is None or not path.exists():
        return None
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable event payload %s: %s", path, exc)
        return None
    if not isinstance(loaded, dict):
        logger.warning("Ignoring event payload %s: top level is not an object", path)
        return None
    return loaded


def _command_pattern(commands: cabc.Iterable[str]) -> re.Pattern[str]:
    names = "|".join(re.escape(name) for name in commands)
    return re.compile(rf"^\s*/(?:{names})\b\s*", re.IGNORECASE)


def strip_command(body: str, commands: cabc.Iterable[str] = DEFAULT_COMMANDS) -> str | None:
    """Return ``body`` without its leading slash command, or None if absent.

    Examples
    --------
    >>> strip_command("/deploy rename brand to Acme")
    'rename brand to Acme'
    >>> strip_command("please /deploy") is None
    True
    """
    match = _command_pattern(commands).match(body)
    if match is None:
        return None
    return body[match.end() :]


def _nested_str(payload: cabc.Mapping[str, typ.Any], section: str, key: str) -> str:
    value = payload.get(section)
    if not isinstance(value, cabc.Mapping):
        return ""
    text = value.get(key)
    return text if isinstance(text, str) else ""


def extract_directive(
    event_name: str | None,
    payload: cabc.Mapping[str, typ.Any] | None,
    *,
    commands: cabc.Iterable[str] = DEFAULT_COMMANDS,
    manual_prompt: str | None = None,
) -> str | None:
    """Return the directive carried by a trigger, or None to skip.

    Parameters
    ----------
    event_name : str or None
        CI event name, for example ``GITHUB_EVENT_NAME``.
    payload : Mapping or None
        Decoded event payload.
    commands : Iterable[str], optional
        Accepted slash command names, without the slash.
    manual_prompt : str or None, optional
        Explicit directive; when non-blank it is returned stripped and the
        event is ignored.
    """
    if manual_prompt and manual_prompt.strip():
        return manual_prompt.strip()
    name = event_name or ""
    data = payload or {}
    if name in _BODY_FIELDS:
        body = _nested_str(data, _BODY_FIELDS[name], "body")
        directive = strip_command(body, commands)
        if directive is None:
            logger.info("Skipping %s event without a slash command", name)
        return directive
    if name == "workflow_dispatch":
        prompt = _nested_str(data, "inputs", "prompt").strip()
        return prompt or None
    logger.info("Skipping unsupported trigger %r", name)
    return None


__all__ = ["extract_directive", "read_event", "strip_command"]
