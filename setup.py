#!/usr/bin/env python

"""
    StyleBuilder
    ============

    StyleBuilder expands shorthand CSS properties of style dictionaries.

"""

import sys

from setuptools import setup

if sys.version_info.major < 3:
    raise RuntimeError(
        'StyleBuilder does not support Python 2.x. '
        'Please use Python 3.')

setup()
