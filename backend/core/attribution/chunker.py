"""
Line-respecting care plan chunker.

Splits oversized care plan text into segments that fit one attribution
call, breaking only at line boundaries.

Dependencies: None
System role: Chunking stage of the attribution pipeline
"""

DEFAULT_MAX_CHUNK_SIZE = 2000


def chunk_care_plan(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """
    Split care plan text into line-aligned chunks.

    Text within budget is returned untouched as a single chunk. Otherwise
    lines are accumulated until the next line would exceed the budget. A
    single line longer than the budget becomes its own oversized chunk
    instead of being cut mid-line. Joining the chunks with newlines
    reproduces the input exactly.

    Args:
        text: Care plan text
        max_chunk_size: Character budget per chunk

    Returns:
        list[str]: Ordered chunks, never empty
    """
    if len(text) <= max_chunk_size:
        return [text]

    chunks: list[str] = []
    current: list[str] = []
    current_size = 0

    for line in text.split("\n"):
        added = len(line) + (1 if current else 0)
        if current and current_size + added > max_chunk_size:
            chunks.append("\n".join(current))
            current = [line]
            current_size = len(line)
        else:
            current.append(line)
            current_size += added

    if current:
        chunks.append("\n".join(current))

    return chunks
