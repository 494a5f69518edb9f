def combined_text(title: str, body: str = "") -> str:
    return f"{title} {body}".strip()


def passes_prefilter(
    title: str,
    body: str = "",
    *,
    min_length: int = 10,
) -> bool:
    """Reject posts too short to carry any signal."""
    return len(combined_text(title, body)) >= min_length
