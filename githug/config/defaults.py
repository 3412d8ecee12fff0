# githug Default Configuration
# Default configuration as Python dict and YAML generator

from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "interactive": "auto",
    "output": {
        "verbose": False,
        "colored": True,
    },
    "commit": {
        "short_sha_length": 7,
        "date_format": "%Y-%m-%d",
    },
}


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# githug configuration
#
# interactive:
#   - auto: prompt only when stdin and stdout are terminals
#   - always: always prompt (missing messages, "stage everything?")
#   - never: behave as a script; prompts are never shown
#
# commit.short_sha_length and commit.date_format control hints such as
#   [1a2b3c4] 2024-05-01: Add louise.txt

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
