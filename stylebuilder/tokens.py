"""Shorthand values tokenizers and four-slot helpers."""

from tinycss2 import parse_component_value_list

# https://www.w3.org/TR/CSS21/box.html#value-def-border-style
BORDER_STYLES = (
    'none', 'hidden', 'dotted', 'dashed', 'solid', 'double', 'groove', 'ridge',
    'inset', 'outset')

# Units considered as explicit by apply_px.
UNITS = ('px', 'em', 'pt', '%')

SIDES = ('Top', 'Right', 'Bottom', 'Left')
CORNERS = ('TopLeft', 'TopRight', 'BottomRight', 'BottomLeft')


class InvalidValues(ValueError):  # noqa: N818
    """Invalid or unsupported value for a known shorthand property."""


def split_on_whitespace(tokens):
    """Group tokens separated by top-level whitespace and comments.

    Each group is serialized to a single string, so that ``auto!important``
    or ``1px/2px`` stay single values. Serialization normalizes the text of
    some tokens, quotes of strings and unclosed functions for example.

    """
    groups = [[]]
    for token in tokens:
        if token.type in ('whitespace', 'comment'):
            if groups[-1]:
                groups.append([])
        else:
            groups[-1].append(token.serialize())
    return [''.join(group) for group in groups if group] or ['']


def tokenize(value):
    """Split a shorthand value into a list of strings.

    Only top-level whitespace splits the value: functions such as
    ``rgb(0, 0, 0)`` are kept as single tokens. A blank value gives a single
    empty token.

    """
    return split_on_whitespace(parse_component_value_list(value))


def split_on_slash(value):
    """Split a shorthand value on top-level ``/``, tokenizing each part."""
    parts = [[]]
    for token in parse_component_value_list(value):
        if token.type == 'literal' and token.value == '/':
            parts.append([])
        else:
            parts[-1].append(token)
    return [split_on_whitespace(part) for part in parts]


def invalid(message, strict):
    """Raise ``InvalidValues`` with ``message`` in strict mode."""
    if strict:
        raise InvalidValues(message)


def expand_to_four(tokens, strict=False):
    """Stretch 1 to 4 tokens to the 4 top, right, bottom, left values.

    Any other number of tokens is returned unchanged, unless ``strict`` is
    set.

    """
    tokens = list(tokens)
    if len(tokens) == 1:
        tokens *= 4
    elif len(tokens) == 2:
        tokens *= 2  # (bottom, left) defaults to (top, right)
    elif len(tokens) == 3:
        tokens.append(tokens[1])  # left defaults to right
    elif len(tokens) != 4:
        invalid(f'expected 1 to 4 token components, got {len(tokens)}', strict)
    return tokens


def _assign(names, values, prefix, suffix):
    values = list(values)
    values += [None] * (len(names) - len(values))
    return {
        f'{prefix}{name}{suffix}': value
        for name, value in zip(names, values)}


def assign_sides(values, prefix='', suffix=''):
    """Name top, right, bottom, left values.

    ``assign_sides(['1px', '2px', '3px', '4px'], 'border', 'Width')`` gives
    ``borderTopWidth``, ``borderRightWidth``, ``borderBottomWidth`` and
    ``borderLeftWidth``. Missing values are ``None``.

    """
    return _assign(SIDES, values, prefix, suffix)


def assign_corners(values, prefix='', suffix=''):
    """Name top-left, top-right, bottom-right, bottom-left values."""
    return _assign(CORNERS, values, prefix, suffix)


def apply_px(values):
    """Add ``px`` to values without a known unit.

    Values including a unit anywhere, such as ``calc(1px + 2)``, are kept.

    """
    return [
        value if any(unit in value for unit in UNITS) else f'{value}px'
        for value in values]
