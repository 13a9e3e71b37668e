"""
testhealth.commands - CLI command implementations
"""

__all__ = [
    "config_cmd",
    "orphans_cmd",
    "summary",
    "tree",
]
