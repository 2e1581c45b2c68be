import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

from scriba import __version__  # noqa

project = "scriba"
copyright = "2024, scriba developers"
author = "scriba developers"
version = __version__
release = version

extensions = [
    "sphinx.ext.autosectionlabel",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.autodoc.typehints",
    "sphinx.ext.todo",
    "autoapi.extension",
]

autodoc_typehints = "description"

autoapi_dirs = ["../../scriba"]
autoapi_member_order = "groupwise"
autoapi_add_toctree_entry = False
autoapi_options = ["members", "undoc-members", "show-inheritance", "imported-members"]

autosectionlabel_prefix_document = True


templates_path = ["_templates"]
exclude_patterns = []

html_theme = "pydata_sphinx_theme"
html_title = "scriba"
