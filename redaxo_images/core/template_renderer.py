"""Placeholder substitution for Dockerfile and hook templates."""

import re
from typing import Dict, Mapping, Sequence

from . import constants
from .tags import format_tags


PLACEHOLDER_PATTERN = re.compile(
    re.escape(constants.PLACEHOLDER_DELIMITER)
    + r"([A-Z0-9_]+)"
    + re.escape(constants.PLACEHOLDER_DELIMITER)
)


def placeholder(name: str) -> str:
    """Return the literal token for a placeholder name, e.g. %%CMD%%."""
    return f"{constants.PLACEHOLDER_DELIMITER}{name}{constants.PLACEHOLDER_DELIMITER}"


def render(template_text: str, context: Mapping[str, str]) -> str:
    """Replace every known placeholder in a template.

    Values are inserted verbatim in a single pass, so slashes, ampersands,
    backslashes and newlines in a value end up in the output as written and
    tokens inside a value are never expanded. Placeholders missing from the
    context are left as they are.

    Args:
        template_text: Template contents
        context: Placeholder name (without delimiters) to value

    Returns:
        Rendered text
    """
    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name in context:
            return context[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(substitute, template_text)


def build_dockerfile_context(
    redaxo_version: str,
    redaxo_sha1: str,
    php_version: str,
    variant: str,
    extras: str,
    cmd: str,
) -> Dict[str, str]:
    """Build the placeholder mapping for a Dockerfile template."""
    return {
        constants.REDAXO_VERSION: redaxo_version,
        constants.REDAXO_SHA1: redaxo_sha1,
        constants.PHP_VERSION: php_version,
        constants.VARIANT: variant,
        constants.VARIANT_EXTRAS: extras,
        constants.CMD: cmd,
    }


def build_hook_context(tags: Sequence[str]) -> Dict[str, str]:
    """Build the placeholder mapping for the post_push hook template."""
    return {constants.TAGS: format_tags(tags)}
