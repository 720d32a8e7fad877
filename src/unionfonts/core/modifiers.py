"""View modifiers."""

from typing import Any

from unionfonts.backends import FontBackend, get_backend
from unionfonts.domain.font import Weight, resolve_weight


def font_weight(view: Any, value: int | Weight, *, backend: FontBackend | None = None) -> Any:
    """Set the font weight of a view.

    Args:
        view: Native view (QWidget, NSView with a font) or any object when
            no toolkit is active
        value: Named weight, or a numeric one (100, 200, ... 900)
        backend: Backend to use instead of the active one

    Returns:
        The modified view, or a ``StyledView`` wrapper without a toolkit

    Raises:
        FatalPreconditionError: If a numeric ``value`` is unsupported
    """
    weight = resolve_weight(value)
    backend = backend if backend is not None else get_backend()
    return backend.apply_view_weight(view, weight)
