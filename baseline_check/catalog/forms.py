"""Form control and input type signatures."""

from baseline_check.catalog.types import Category, SignatureRow


def _input_type(name: str) -> str:
    return rf"""type\s*=\s*["']{name}["']"""


_INPUT_TYPES = (
    "email", "url", "tel", "search", "number", "range", "color",
    "date", "datetime-local", "month", "week", "time", "file",
)

FORM_SIGNATURES: tuple[SignatureRow, ...] = tuple(
    SignatureRow(f"input-{name}", Category.FORM, (_input_type(name),))
    for name in _INPUT_TYPES
) + (
    SignatureRow("input-multiple", Category.FORM, (r"multiple",)),
    SignatureRow("input-pattern", Category.FORM, (r"pattern\s*=",)),
    SignatureRow("input-placeholder", Category.FORM, (r"placeholder\s*=",)),
    SignatureRow("input-required", Category.FORM, (r"required",)),
    SignatureRow("input-autofocus", Category.FORM, (r"autofocus",)),
    SignatureRow("input-autocomplete", Category.FORM, (r"autocomplete\s*=",)),
    SignatureRow("form-validation", Category.FORM, (
        r"checkValidity\s*\(", r"reportValidity\s*\(", r"setCustomValidity\s*\(",
    )),
)
