"""
Validation mode selection.

A matrix is either checked (every precondition validated, violations
raise) or unchecked (no validation code on the call path). The choice is
made per matrix by picking a class, or through the factories with a
``mode`` keyword resolved here.

'auto' behaves like a debug/release build switch: it resolves to
'unchecked' when Python runs with assertions disabled (``python -O``)
and to 'checked' otherwise.
"""

from typing import Literal

from densematrix.core.exceptions import ValidationError

ModeChoice = Literal['auto', 'checked', 'unchecked']
Mode = Literal['checked', 'unchecked']

MODES = frozenset({'auto', 'checked', 'unchecked'})


def default_mode() -> Mode:
    """Mode that 'auto' resolves to in the running interpreter."""
    return 'checked' if __debug__ else 'unchecked'


def select_mode(mode: ModeChoice = 'auto') -> Mode:
    """
    Resolve a mode preference to a concrete mode.

    Args:
        mode: 'auto', 'checked' or 'unchecked'

    Returns:
        'checked' or 'unchecked'

    Raises:
        ValidationError: If mode is not a known choice
    """
    if mode not in MODES:
        raise ValidationError(
            f"Unknown mode: {mode!r}. Must be 'auto', 'checked', or 'unchecked'."
        )
    if mode == 'auto':
        return default_mode()
    return mode
