"""
Configuration-related constants and resource limits.
"""

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

DEFAULT_ENV_PREFIX = "SIGCTL_"

# Separates path components in environment override names:
# SIGCTL_CONTROL__PROCESS_NAME -> control.process_name
ENV_PATH_SEPARATOR = "__"
