"""Input-layer public API for key decoding and key bindings."""

from .key_config import STRUCTURAL_KEYS, KeyConfig, key_display_name
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, read_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "KeyConfig",
    "STRUCTURAL_KEYS",
    "key_display_name",
    "KeyComboBinding",
    "KeyComboRegistry",
]
