import os
import sys
import sphinx_rtd_theme

sys.path.insert(0, os.path.abspath('..'))

project = "Lattice Reduction Estimation"
author = "Nicolai Krebs"
html_theme = "sphinx_rtd_theme"

extensions = ['sphinx.ext.autodoc', 'sphinx_rtd_theme','sphinx.ext.mathjax', 'sphinxcontrib.bibtex', 'sphinx.ext.autosectionlabel',]
autoclass_content = 'both'
bibtex_bibfiles = ['bibliography.bib']
bibtex_default_style = 'alpha'
autosectionlabel_prefix_document = True
