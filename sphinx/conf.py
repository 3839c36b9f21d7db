#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# PyMPQ documentation build configuration file

import os
import sys
sys.path.insert(1, os.path.abspath('..'))

import mpq_version

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
]

master_doc = 'index'

project = 'PyMPQ'
copyright = '2026, The PyMPQ developers'
author = 'The PyMPQ developers'

version = mpq_version.version
release = mpq_version.version

exclude_patterns = ['_build']

# Keep the q_* helpers in the order they are applied
autodoc_member_order = 'bysource'

# mpq.gmp needs gmpy2, which is an optional extra
autodoc_mock_imports = ['gmpy2']

doctest_global_setup = 'from mpq import Rational'

html_theme = 'classic'
