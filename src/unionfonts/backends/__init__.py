"""Native toolkit backends.

Exactly one backend is active per process. With ``BackendChoice.AUTO`` the
AppKit backend wins when pyobjc's AppKit and CoreText are importable, then the
Qt backend when PyQt6 is, and otherwise the fallback backend, which ignores
OpenType features.

Key objects:
- FontBackend: Capability interface implemented per toolkit
- select_backend: Build a backend for a BackendChoice
- get_backend / set_backend / configure: Access the active backend
"""

import importlib.util
import logging

from unionfonts.backends.base import FontBackend
from unionfonts.backends.fallback import FallbackBackend
from unionfonts.config import BackendChoice, UnionFontsSettings
from unionfonts.exceptions import BackendUnavailableError

logger = logging.getLogger(__name__)

_REQUIRED_MODULES: dict[BackendChoice, tuple[str, ...]] = {
    BackendChoice.APPKIT: ("AppKit", "CoreText"),
    BackendChoice.QT: ("PyQt6.QtGui",),
}

_active: FontBackend | None = None


def _missing_module(choice: BackendChoice) -> str | None:
    for module in _REQUIRED_MODULES.get(choice, ()):
        try:
            if importlib.util.find_spec(module) is None:
                return module
        except ImportError:
            # parent package missing
            return module
    return None


def is_available(choice: BackendChoice) -> bool:
    """Whether the toolkit behind ``choice`` can be imported."""
    return _missing_module(choice) is None


def _create(choice: BackendChoice) -> FontBackend:
    if choice is BackendChoice.APPKIT:
        from unionfonts.backends.appkit import AppKitBackend

        return AppKitBackend()
    if choice is BackendChoice.QT:
        from unionfonts.backends.qt import QtBackend

        return QtBackend()
    return FallbackBackend()


def select_backend(choice: BackendChoice = BackendChoice.AUTO) -> FontBackend:
    """Create the backend for ``choice``.

    Args:
        choice: Requested backend; AUTO picks the first available toolkit

    Returns:
        New backend instance

    Raises:
        BackendUnavailableError: If an explicitly requested toolkit is missing
    """
    choice = BackendChoice(choice)
    if choice is BackendChoice.AUTO:
        for candidate in (BackendChoice.APPKIT, BackendChoice.QT):
            if not is_available(candidate):
                continue
            try:
                backend = _create(candidate)
            except ImportError as e:
                # installed but unusable, e.g. missing system libraries
                logger.debug("Skipping %s font backend: %s", candidate.value, e)
                continue
            logger.debug("Selected %s font backend", candidate.value)
            return backend
        logger.debug("No native toolkit found, OpenType features will be ignored")
        return FallbackBackend()

    missing = _missing_module(choice)
    if missing is not None:
        raise BackendUnavailableError(choice.value, f"cannot import '{missing}'")
    try:
        return _create(choice)
    except ImportError as e:
        raise BackendUnavailableError(choice.value, str(e)) from e


def get_backend() -> FontBackend:
    """Return the active backend, selecting one on first use."""
    global _active
    if _active is None:
        _active = select_backend(BackendChoice.AUTO)
    return _active


def set_backend(backend: FontBackend | BackendChoice | str | None) -> FontBackend | None:
    """Replace the active backend.

    Args:
        backend: Backend instance, a choice to select, or None to reselect
            automatically on next use

    Returns:
        The new active backend (None when reset)
    """
    global _active
    if backend is None or isinstance(backend, FontBackend):
        _active = backend
    else:
        _active = select_backend(BackendChoice(backend))
    return _active


def configure(settings: UnionFontsSettings) -> FontBackend:
    """Activate the backend named by ``settings``."""
    set_backend(settings.backend)
    return get_backend()


__all__ = [
    "FallbackBackend",
    "FontBackend",
    "configure",
    "get_backend",
    "is_available",
    "select_backend",
    "set_backend",
]
