import importlib
import platform
from typing import Dict, Optional, Tuple, Type

from .base import Pasteboard

# platform.system() -> (adapter module, adapter class)
_ADAPTERS: Dict[str, Tuple[str, str]] = {
    "Linux": ("linux", "LinuxPasteboard"),
    "Darwin": ("macos", "MacOSPasteboard"),
    "Windows": ("windows", "WindowsPasteboard"),
}


def get_pasteboard_class(system: Optional[str] = None) -> Type[Pasteboard]:
    """Adapter class for ``system``, or for the running platform when omitted.

    Adapter modules are imported on demand so that platform-only libraries
    are never needed elsewhere.
    """
    system = system or platform.system()
    try:
        module_name, class_name = _ADAPTERS[system]
    except KeyError:
        raise NotImplementedError(f"No pasteboard adapter for platform {system!r}") from None
    module = importlib.import_module(f".{module_name}", __package__)
    return getattr(module, class_name)


def get_pasteboard(system: Optional[str] = None) -> Pasteboard:
    return get_pasteboard_class(system)()
