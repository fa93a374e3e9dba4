"""
how - ask your terminal how to do anything.

Turns a natural-language question into executable shell commands using the
Google Gemini API. The request engine is resilient to:
- Transient network timeouts (exponential backoff)
- Rate limiting (HTTP 429, longer backoff)
- Content-safety rejections (classified, never retried)

Architecture: argparse CLI + httpx transport + explicit retry state machine
"""

__version__ = "0.1.0"
