# Configuration file for the Sphinx documentation builder.
# Full config reference:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------
# Make the project root importable so autodoc can import `quirion_import`, `extraction`.
import os
import sys

sys.path.insert(0, os.path.abspath("."))

# -- Project information -----------------------------------------------------
project = "quirion-import"
author = "Ty Baker"
copyright = "2025, Ty Baker"
release = "0.1.0"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",   # pull in docstrings
    "sphinx.ext.napoleon",  # allow Google/NumPy-style docstrings
    "sphinx.ext.viewcode",  # add [source] links
    "sphinx.ext.autosummary",
]
autosummary_generate = True
# The UI and PDF adapter pull in heavy deps; docs only need their signatures.
autodoc_mock_imports = ["pdfplumber", "streamlit", "pandas"]

autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": False,
}
autodoc_typehints = "description"

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_use_param = True
napoleon_use_rtype = True

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store", "tests"]

# -- Options for HTML output -------------------------------------------------
html_theme = "alabaster"
html_title = f"{project} {release}"
