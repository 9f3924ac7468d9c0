"""Sphinx configuration."""
project = "fastaval"
author = "fastaval developers"
copyright = "2026, fastaval developers"
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_click",
    "myst_parser",
]
autodoc_typehints = "description"
html_theme = "furo"
