"""Image tag generation for a single matrix entry."""

from typing import List, Sequence

from .constants import RUNTIME_PREFIX


def generate_tags(
    aliases: Sequence[str],
    php_version: str,
    variant: str,
    default_php_version: str,
    default_variant: str,
    runtime_prefix: str = RUNTIME_PREFIX,
) -> List[str]:
    """Generate the registry tags for one PHP version and variant.

    Every alias gets a specific tag like ``5.8.1-php7.2-apache``. The default
    PHP version combined with the default variant additionally gets the bare
    alias (``5.8.1``, ``5.8``, ``5``) right after its specific tag.

    Args:
        aliases: Version tree, most specific first
        php_version: PHP version of this image
        variant: Variant name of this image
        default_php_version: PHP version that receives the bare tags
        default_variant: Variant that receives the bare tags
        runtime_prefix: Prefix placed before the PHP version

    Returns:
        Ordered list of tags
    """
    is_default = php_version == default_php_version and variant == default_variant

    tags = []
    for alias in aliases:
        tags.append(f"{alias}-{runtime_prefix}{php_version}-{variant}")
        if is_default:
            tags.append(alias)
    return tags


def format_tags(tags: Sequence[str]) -> str:
    """Join tags into the space separated list used by the post_push hook."""
    return " ".join(tags)
