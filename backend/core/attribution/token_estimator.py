"""
Token estimation for routing decisions.

Approximates LLM token usage from character length. Only used to pick the
single-call or chunked path, so estimation error never affects output.

Dependencies: None
System role: Input size estimation for the attribution pipeline
"""

import math

# Calibrated for clinical prose
CHARS_PER_TOKEN = 3.5


def estimate_tokens(text: str, chars_per_token: float = CHARS_PER_TOKEN) -> int:
    """
    Estimate tokens consumed by text.

    Args:
        text: Text to estimate
        chars_per_token: Characters per token ratio

    Returns:
        int: Estimated token count, rounded up
    """
    return math.ceil(len(text) / chars_per_token)
