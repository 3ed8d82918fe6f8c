"""Walk style trees and expand their shorthand properties."""

import functools
from collections.abc import Mapping


def build_styles(styles, expanders, strict):
    """Return a copy of ``styles`` with shorthand properties expanded.

    ``styles`` can be a mapping, a list or a tuple of styles, a callable
    returning styles, or any other value returned unchanged. Only the keys of
    mappings are looked up in ``expanders``.

    """
    if isinstance(styles, str):
        return styles
    elif isinstance(styles, Mapping):
        expanded = {}
        for key, value in styles.items():
            if isinstance(value, str) and key in expanders:
                # Longhands replace the shorthand, at its position.
                expanded.update(expanders[key](value, strict=strict))
            else:
                expanded[key] = build_styles(value, expanders, strict)
        return expanded
    elif isinstance(styles, (list, tuple)):
        expanded = [build_styles(value, expanders, strict) for value in styles]
        return tuple(expanded) if isinstance(styles, tuple) else expanded
    elif callable(styles):
        return wrap_callable(styles, expanders, strict)
    return styles


def wrap_callable(function, expanders, strict):
    """Wrap a callable so that the styles it returns are expanded."""
    @functools.wraps(function)
    def build_wrapper(*args, **kwargs):
        return build_styles(function(*args, **kwargs), expanders, strict)
    return build_wrapper
