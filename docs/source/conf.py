# Configuration file for the Sphinx documentation builder.

import os.path
import sys

tqsim_root = os.path.join(os.path.dirname(__file__), "../..")
sys.path.insert(0, tqsim_root)

# -- Project information

project = "tqsim"
copyright = "2026, tqsim developers"
author = "tqsim developers"

release = "0.1"
version = "0.1.0"

# -- General configuration

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

autodoc_default_options = {
    "members": True,
    "undoc-members": True,
}

# -- Options for HTML output

html_theme = "sphinx_rtd_theme"
