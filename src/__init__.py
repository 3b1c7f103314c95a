"""String Formatter - configurable text transformation pipeline.

Applies a fixed-order chain of independently toggled string operations:
- Toy ciphers, run-length compression, Morse and code point encodings
- Sentiment labelling, spell-check, summarization, translation stub
- Locale-aware number, currency and date rendering
"""

__version__ = "0.1.0"
