"""Shorthand CSS properties expander for style dictionaries.

The public API is what is accessible from this "root" packages without
importing sub-modules.

"""

VERSION = __version__ = '1.0.0'

#: Default values for :func:`build` options.
#:
#: :param bool strict:
#:     Whether :class:`InvalidValues` is raised for malformed shorthand
#:     values, instead of logging a warning and expanding them anyway.
#: :param dict expanders:
#:     A dictionary mapping shorthand property names to expanders, used
#:     instead of :data:`EXPANDERS` when set. Expanders are called with the
#:     property value and a ``strict`` keyword argument, and return a
#:     dictionary of longhand properties.
DEFAULT_OPTIONS = {
    'strict': False,
    'expanders': None,
}

__all__ = [
    'BORDER_STYLES', 'DEFAULT_OPTIONS', 'EXPANDERS', 'UNITS', 'VERSION',
    'InvalidValues', '__version__', 'apply_px', 'assign_corners',
    'assign_sides', 'border', 'border_bottom', 'border_color', 'border_left',
    'border_radius', 'border_right', 'border_side', 'border_style',
    'border_top', 'border_width', 'build', 'expand_to_four', 'expander',
    'margin', 'padding', 'tokenize']


# Import after setting the version.
from .logger import LOGGER  # noqa: I001, E402
from .tokens import (  # noqa: E402
    BORDER_STYLES, UNITS, InvalidValues, apply_px, assign_corners,
    assign_sides, expand_to_four, tokenize)
from .expanders import (  # noqa: E402
    EXPANDERS, border, border_bottom, border_color, border_left,
    border_radius, border_right, border_side, border_style, border_top,
    border_width, expander, margin, padding)
from .builder import build_styles  # noqa: E402


def build(styles, **options):
    """Expand shorthand properties of ``styles``.

    ``styles`` is a dictionary of properties, or a list of such
    dictionaries. Values can be nested dictionaries, lists, or callables
    returning styles: callables are wrapped so that their results are
    expanded when they are called.

    The returned styles have the same structure as ``styles``, with each
    shorthand property replaced by its longhand properties.

    :param options:
        The ``options`` parameter includes by default the
        :data:`DEFAULT_OPTIONS` values.

    """
    for unknown in set(options) - set(DEFAULT_OPTIONS):
        LOGGER.warning('Unknown build option: %s.', unknown)
    new_options = DEFAULT_OPTIONS.copy()
    new_options.update(options)
    options = new_options
    expanders = EXPANDERS if options['expanders'] is None else options['expanders']
    return build_styles(styles, expanders, options['strict'])
