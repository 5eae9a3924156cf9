"""Utility modules for codeweave.

Provides:
- text: identifier validity and case conversion helpers
- logger: get_logger for logging
"""

from codeweave.utils.logger import get_logger
from codeweave.utils.text import is_identifier, split_words, to_camel, to_pascal, to_snake

__all__ = [
    "get_logger",
    "is_identifier",
    "split_words",
    "to_camel",
    "to_pascal",
    "to_snake",
]
