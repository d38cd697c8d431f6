"""Build the plugin configuration from the value passed to ``setup``."""

import logging
from typing import Any, Sequence, Union

from pydantic import ValidationError

from obsidian_nav.errors import BadPreferences
from obsidian_nav.models.config_models import ObsidianConfig

logger = logging.getLogger(__name__)

ROOT_PATH = "."


def format_error_path(loc: Sequence[Union[str, int]]) -> str:
    """Render a pydantic error location as a dotted/indexed path.

    Examples:
        >>> format_error_path(("notes_dir",))
        'notes_dir'
        >>> format_error_path(("templates", 2, "path"))
        'templates[2].path'
        >>> format_error_path(())
        '.'
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path or ROOT_PATH


def build_config(raw: Any = None) -> ObsidianConfig:
    """Deserialize the host supplied preferences into an :class:`ObsidianConfig`.

    Args:
        raw: Dynamic value received from the host. ``None`` selects the
            defaults without running validation. An empty sequence is
            read as an empty mapping, since hosts cannot tell an empty table
            from an empty list.

    Returns:
        The validated configuration.

    Raises:
        BadPreferences: If ``raw`` has an unknown key or a value of the wrong
            type. The error carries the path recorded by the validator where
            the failure happened.
    """
    if raw is None:
        return ObsidianConfig()
    if isinstance(raw, (list, tuple)) and not raw:
        raw = {}

    try:
        config = ObsidianConfig.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors(include_url=False)[0]
        path = format_error_path(first["loc"])
        logger.warning("Rejected preferences at '%s': %s", path, first["msg"])
        raise BadPreferences(path=path, reason=first["msg"]) from exc

    logger.info("Loaded preferences with notes_dir '%s'", config.notes_dir)
    return config
