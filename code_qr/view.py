"""Render form state as a chat reply."""

from dataclasses import dataclass
from typing import Optional

from .config import CODE_EXAMPLE, CODE_LENGTH
from .form import FormSnapshot
from .validator import counter

SUCCESS_BANNER = "✅ Code is valid! QR code generated successfully."
PLACEHOLDER = (
    f"QR code will appear here when you enter {CODE_LENGTH} valid characters"
)


@dataclass(frozen=True)
class View:
    """Rendered reply: text body and optional PNG."""
    text: str
    image: Optional[bytes] = None


def render(snapshot: FormSnapshot) -> View:
    """Pure function of form state to reply."""
    state = snapshot.validation
    lines = [
        f"Code: {snapshot.code}" if snapshot.code
        else f"Code: (empty, e.g. {CODE_EXAMPLE})",
        counter(snapshot.code),
    ]

    if snapshot.error:
        lines.append(f"⚠️ {snapshot.error}")

    if snapshot.artifact is not None:
        if state.is_valid:
            lines.append(SUCCESS_BANNER)
        lines.append("")
        lines.append("When scanned, this QR code will display:")
        lines.append(snapshot.code)
    elif not state.is_empty:
        lines.append(PLACEHOLDER)

    return View(text="\n".join(lines), image=snapshot.artifact)
