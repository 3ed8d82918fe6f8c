"""Expanders for shorthand properties."""

import functools

from .logger import LOGGER
from .tokens import (
    BORDER_STYLES, InvalidValues, assign_corners, assign_sides, expand_to_four,
    invalid, split_on_slash, tokenize)

EXPANDERS = {}


def lenient(property_name):
    """Decorator making expanders log invalid values instead of raising.

    The wrapped expander is first called in strict mode. When it raises
    ``InvalidValues``, the error is raised again if the caller asked for
    strict mode. Otherwise, a warning is logged and the expander is called
    again to get its permissive output.

    """
    def lenient_decorator(wrapped):
        """Decorate the ``wrapped`` expander."""
        @functools.wraps(wrapped)
        def lenient_wrapper(value, *args, strict=False, **kwargs):
            """Wrap the expander."""
            try:
                return wrapped(value, *args, strict=True, **kwargs)
            except InvalidValues as exception:
                if strict:
                    raise
                LOGGER.warning(
                    'Invalid `%s: %s`, %s, expanded anyway.',
                    property_name, value, exception)
            return wrapped(value, *args, strict=False, **kwargs)
        return lenient_wrapper
    return lenient_decorator


def expander(property_name):
    """Decorator adding a lenient function to the ``EXPANDERS``."""
    def expander_decorator(function):
        """Add ``function`` to the ``EXPANDERS``."""
        assert property_name not in EXPANDERS, property_name
        function = lenient(property_name)(function)
        EXPANDERS[property_name] = function
        return function
    return expander_decorator


def expand_four_sides(value, prefix, suffix='', strict=False):
    """Expand values setting a token for the four sides of a box."""
    return assign_sides(expand_to_four(tokenize(value), strict), prefix, suffix)


@expander('margin')
def margin(value, strict=False):
    """Expand the ``margin`` shorthand property."""
    return expand_four_sides(value, 'margin', strict=strict)


@expander('padding')
def padding(value, strict=False):
    """Expand the ``padding`` shorthand property."""
    return expand_four_sides(value, 'padding', strict=strict)


@expander('borderStyle')
def border_style(value, strict=False):
    return expand_four_sides(value, 'border', 'Style', strict)


@expander('borderColor')
def border_color(value, strict=False):
    return expand_four_sides(value, 'border', 'Color', strict)


@expander('borderWidth')
def border_width(value, strict=False):
    return expand_four_sides(value, 'border', 'Width', strict)


@expander('borderRadius')
def border_radius(value, strict=False):
    """Expand the ``borderRadius`` shorthand property.

    Horizontal and vertical radii can be separated by ``/``, corner values
    then hold both radii separated by a space.

    """
    horizontal, *vertical = split_on_slash(value)
    corners = expand_to_four(horizontal, strict)
    if vertical:
        if len(vertical) > 1:
            invalid('expected only one "/" separator', strict)
        vertical = expand_to_four(vertical[0], strict)
        corners = [f'{x} {y}' for x, y in zip(corners, vertical)]
    return assign_corners(corners, 'border', 'Radius')


def expand_border_side(value, side, strict=False):
    """Expand the ``border{side}`` shorthand property.

    Tokens are positional: width, style, then color. A single border style
    keyword only sets the style.

    """
    tokens = tokenize(value)
    names = tuple(f'border{side}{suffix}' for suffix in ('Width', 'Style', 'Color'))
    width, style, color = names
    if len(tokens) == 1 and tokens[0] in BORDER_STYLES:
        return {width: 'initial', style: tokens[0], color: 'initial'}

    if len(tokens) > 3:
        invalid(f'expected 1 to 3 token components, got {len(tokens)}', strict)
    styles = {}
    if len(tokens) == 1:
        styles = {width: tokens[0], style: 'initial', color: 'initial'}
    for name, token in zip(names, tokens):
        if token:
            styles[name] = token
    return styles


@lenient('borderSide')
def border_side(value, side, strict=False):
    """Expand a per-side border shorthand, ``side`` being ``'Top'``, etc."""
    return expand_border_side(value, side, strict)


@expander('borderTop')
def border_top(value, strict=False):
    return expand_border_side(value, 'Top', strict)


@expander('borderRight')
def border_right(value, strict=False):
    return expand_border_side(value, 'Right', strict)


@expander('borderBottom')
def border_bottom(value, strict=False):
    return expand_border_side(value, 'Bottom', strict)


@expander('borderLeft')
def border_left(value, strict=False):
    return expand_border_side(value, 'Left', strict)


@expander('border')
def border(value, strict=False):
    """Expand the ``border`` shorthand property.

    The same value is used for the four sides.

    """
    # TODO: handle "<style> <color>" values, currently read as width and style.
    styles = {}
    for side in ('Left', 'Right', 'Top', 'Bottom'):
        styles.update(expand_border_side(value, side, strict))
    return styles
