"""Built-in host imports published under the 'env' namespace."""
from __future__ import annotations
from typing import Dict, List, Tuple, Optional, Callable, Any

from ..utils.constants import ENV_NAMESPACE
from .core import Proto, register_builtins


def negate(value):
    """Arithmetic negation of one numeric argument."""
    return -value


# None prototype: signature follows the module's (T) -> (T) declaration
_BUILTINS: Dict[Tuple[str, str], Tuple[Optional[Proto], Callable[..., Any]]] = {
    (ENV_NAMESPACE, "negate"): (None, negate),
}


def get_builtin_env_stubs() -> dict:
    """Get a copy of the built-in env stub table."""
    return dict(_BUILTINS)


def register_env_stubs(stubs, selection: Optional[List[str]] = None) -> None:
    """Register the built-in env stubs.

    Args:
        stubs: Stubs manager instance
        selection: Optional list of names to register (default: all)
    """
    register_builtins(stubs, _BUILTINS, selection)
