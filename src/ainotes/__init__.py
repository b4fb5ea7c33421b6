"""AI Notes - note taking with on-device text analysis.

AI Notes enriches each note with:
- A title taken from its first sentence
- An extractive summary of its most representative sentences
- Keyword tags from its nouns and verbs
- A positive/negative/neutral sentiment label

Notes are stored per user in MongoDB and can be dictated.

Usage:
    python -m ainotes analyze "Some text to analyze."
    python -m ainotes --profile prod notes list
"""

__version__ = "0.1.0"

from .config import AinotesConfig
from .config.loader import load_config

__all__ = [
    "AinotesConfig",
    "__version__",
    "load_config",
]
