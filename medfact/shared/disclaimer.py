"""
MedFact Medical Disclaimer

Locked disclaimer copy attached to every health report.

RULES (LOCKED):
1. Full text accompanies every stored report and every results screen.
2. Compact text is only for footers where the full text is already shown.

This module only handles text selection; placement is up to the
presentation layer.
"""

MEDICAL_DISCLAIMER = (
    "This information is for educational purposes only and is not intended as medical advice, "
    "diagnosis, or treatment. Always consult with a qualified healthcare professional for "
    "medical concerns. If you are experiencing a medical emergency, call emergency services immediately."
)

MEDICAL_DISCLAIMER_COMPACT = (
    "This analysis is for informational purposes only - "
    "Always consult healthcare professionals for medical advice"
)


def render_disclaimer_block(compact: bool = False, symbol: str = "⚠️") -> str:
    """
    Render the disclaimer for display.

    Example:
        >>> render_disclaimer_block(compact=True)
        "⚠️ This analysis is for informational purposes only - ..."
    """
    text = MEDICAL_DISCLAIMER_COMPACT if compact else MEDICAL_DISCLAIMER
    if not symbol:
        return text
    return f"{symbol} {text}"
