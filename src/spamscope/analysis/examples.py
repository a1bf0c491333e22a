# =============================================================================
# Built-in Examples
# =============================================================================
# Sample messages for a quick test drive: two obvious spams and one
# legitimate email.
# =============================================================================

from dataclasses import dataclass


@dataclass(frozen=True)
class Example:
    """A labelled sample message."""
    label: str
    text: str


EXAMPLES: tuple[Example, ...] = (
    Example(
        label="Prize Winner",
        text=(
            "CONGRATULATIONS! You've WON $1,000,000! Click here NOW to claim your prize! "
            "Limited time offer! Act fast! FREE money waiting!"
        ),
    ),
    Example(
        label="Urgent Offer",
        text=(
            "URGENT! Your account will be suspended! Click here immediately to verify "
            "your information and avoid account closure!"
        ),
    ),
    Example(
        label="Legitimate Email",
        text=(
            "Hi team, I wanted to follow up on our meeting yesterday. Could you please "
            "send me the project timeline we discussed? Thanks!"
        ),
    ),
)
