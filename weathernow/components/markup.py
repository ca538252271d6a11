"""Helpers for putting user and upstream text into markup."""


def escape_markup(text: str) -> str:
    """Escape markup characters in user content."""
    # Only an opening bracket can start a markup tag
    return text.replace("[", r"\[")
