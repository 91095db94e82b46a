"""Escaping text for use inside LaTeX body text."""

# Characters that must be preceded by a backslash when placed literally.
LATEX_SPECIAL_CHARS = ('#', '%', '_')


def escape_latex(text: str) -> str:
    """LaTeX-escape a literal text run.

    Each occurrence of '#', '%' and '_' gets a leading backslash; every
    other character passes through unchanged. Text without any of those
    characters is returned as the same object.

    Not safe to re-apply: escaping already-escaped text escapes it again.

    Args:
        text: Literal text content from the Markdown document

    Returns:
        Text safe to place inside LaTeX body text
    """
    if not any(char in text for char in LATEX_SPECIAL_CHARS):
        return text

    for char in LATEX_SPECIAL_CHARS:
        text = text.replace(char, '\\' + char)
    return text
