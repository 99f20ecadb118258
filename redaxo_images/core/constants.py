"""Constants used throughout the REDAXO image generator."""


# Release defaults
DEFAULT_REDAXO_VERSION = "5.15.0"
DEFAULT_REDAXO_SHA1 = "ffa10aaab01ffc39425ec31e15c00ec96d948db9"

# Runtime axis
DEFAULT_PHP_VERSIONS = ["8.2", "8.1"]
DEFAULT_PHP_VERSION = "8.1"
RUNTIME_PREFIX = "php"

# Variant axis
DEFAULT_VARIANT = "apache"
DEFAULT_VARIANTS = {
    "apache": {
        "base": "debian",
        "cmd": "apache2-foreground",
        "extras_file": "apache-extras",
    },
    "fpm": {
        "base": "debian",
        "cmd": "php-fpm",
    },
}

# Placeholder names (rendered as %%NAME%% in templates)
PLACEHOLDER_DELIMITER = "%%"
REDAXO_VERSION = "REDAXO_VERSION"
REDAXO_SHA1 = "REDAXO_SHA1"
PHP_VERSION = "PHP_VERSION"
VARIANT = "VARIANT"
VARIANT_EXTRAS = "VARIANT_EXTRAS"
CMD = "CMD"
TAGS = "TAGS"

# Template and output file names
TEMPLATES_DIR_NAME = "templates"
DOCKERFILE_TEMPLATE_PREFIX = "Dockerfile-"
HOOK_TEMPLATE_NAME = "post_push.sh"
ENTRYPOINT_TEMPLATE_NAME = "docker-entrypoint.sh"

DOCKERFILE_NAME = "Dockerfile"
HOOKS_DIR_NAME = "hooks"
HOOK_FILE_NAME = "post_push"
ENTRYPOINT_FILE_NAME = "docker-entrypoint.sh"

# Configuration
CONFIG_FILE_NAME = "matrix.yml"
