"""
Text processing utilities for model answers.

Models often wrap commands in Markdown code fences even when told not to.
These helpers strip that wrapping and split the answer into command lines.
"""

FENCE = "```"
BACKTICK = "`"


def clean_response(text: str) -> str:
    """
    Remove a surrounding Markdown code fence or inline-code backticks.

    A triple-backtick fence loses its opening line when that line carries a
    language tag (```bash). A single backtick pair is removed as-is.

    Args:
        text: Raw answer text

    Returns:
        Unwrapped, trimmed text

    Examples:
        >>> clean_response("```bash\\nls -la\\n```")
        'ls -la'
        >>> clean_response("`pwd`")
        'pwd'
    """
    text = text.strip()

    if text.startswith(FENCE) and text.endswith(FENCE) and len(text) >= 2 * len(FENCE):
        first_line = text.split("\n", 1)[0]
        if len(first_line) > len(FENCE) and "\n" in text:
            text = text[len(first_line):-len(FENCE)]
        else:
            text = text[len(FENCE):-len(FENCE)]
        text = text.strip()
    elif text.startswith(BACKTICK) and text.endswith(BACKTICK) and len(text) >= 2:
        text = text[1:-1].strip()

    return text.strip()


def split_commands(text: str) -> list[str]:
    """Split an answer into non-empty, trimmed lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]
