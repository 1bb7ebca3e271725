# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = 'unitpipe'
copyright = '2026, unitpipe contributors'
author = 'unitpipe contributors'
html_title = 'unitpipe Docs'

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.viewcode',
    'sphinx_copybutton',
    "myst_parser"
]

# Document members in source order; unit catalogues read better that way
autodoc_member_order = 'bysource'

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']


# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = "furo"

html_theme_options = {
    "sidebar_hide_name": False,
    "navigation_with_keys": True,
    "top_of_page_buttons": ["view"],
    "light_css_variables": {
        "color-brand-primary": "#2e7d32",
        "color-brand-content": "#1b5e20",
    },
    "dark_css_variables": {
        "color-brand-primary": "#81c784",
        "color-brand-content": "#a5d6a7",
    },
}


source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
