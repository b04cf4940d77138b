# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html


# -- Path setup --------------------------------------------------------------

# The istyle package has no __init__.py, its directory has to be importable
# from the repository root.

import os
import sys

sys.path.insert(0, os.path.abspath('../../.'))


# -- Project information -----------------------------------------------------

project = 'istyle'
copyright = '2024, m3shware'
author = 'm3shware'

# The full version, including alpha/beta/rc tags
release = '1.0'


# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.intersphinx',
    'sphinx.ext.napoleon',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
]

# Link to the python and numpy documentation. VTK classes are referenced
# by name only.
intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable', None),
}

# Turn on .rst file generation when using autosummary
autosummary_generate = True
autosummary_generate_overwrite = True

templates_path = ['_templates']
exclude_patterns = []

toc_object_entries = False


# -- Options for AutoDoc output -------------------------------------------

autodoc_member_order = 'bysource'

def skip(app, what, name, obj, skip, options):
    if name == "__init__":
        return True
    # Interactor styles inherit hundreds of wrapped VTK methods.
    if 'vtkmodule' in str(obj):
        return True

    return None

def setup(app):
    app.connect("autodoc-skip-member", skip)


# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
html_show_sourcelink = True
