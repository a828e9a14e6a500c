"""
Human-readable rendering of a fitted quadratic.
"""

from pyquadfit.core.compute.tolerances import TERM_DISPLAY_TOLERANCE


def format_equation(
    a: float,
    b: float,
    c: float,
    *,
    precision: int = 4,
    tol: float = TERM_DISPLAY_TOLERANCE,
) -> str:
    """
    Render y = a + b·x + c·x² as text.

    Terms with magnitude below tol are omitted. The first rendered term
    carries its own sign; later terms are joined with an explicit "+" or
    "-" followed by the magnitude. If every term is omitted the result
    is "y = 0".

    Examples:
        >>> format_equation(1.0, -2.0, 0.5)
        'y = 1.0000 - 2.0000x + 0.5000x²'
        >>> format_equation(0.0, 3.0, 0.0)
        'y = 3.0000x'
    """
    terms: list[str] = []
    for coef, suffix in ((a, ''), (b, 'x'), (c, 'x²')):
        if abs(coef) < tol:
            continue
        if not terms:
            terms.append(f"{coef:.{precision}f}{suffix}")
        else:
            sign = '-' if coef < 0 else '+'
            terms.append(f"{sign} {abs(coef):.{precision}f}{suffix}")

    if not terms:
        terms.append('0')

    return "y = " + " ".join(terms)
