"""Logging setup.

The rest of the code gets the logger through this module rather than
``logging.getLogger`` to make sure that it is configured.

Warnings are logged for malformed shorthand values that are expanded anyway
and for unknown options. Nothing is logged for valid styles.

"""

import logging

LOGGER = logging.getLogger('stylebuilder')
if not LOGGER.handlers:  # pragma: no cover
    LOGGER.setLevel(logging.WARNING)
    LOGGER.addHandler(logging.NullHandler())
