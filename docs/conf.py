import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath('..'))

import unifi_network_api  # noqa: E402

project = 'unifi-network-api'
copyright = f'{datetime.now().year}, unifi-network-api contributors'
author = 'unifi-network-api contributors'

release = unifi_network_api.__version__

# -- General configuration ---------------------------------------------------
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

autosummary_generate = True
autodoc_member_order = 'bysource'
autoclass_content = 'both'
autodoc_typehints = 'description'
autodoc_typehints_format = 'short'
autodoc_inherit_docstrings = True

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', '_autosummary']


def skip_extra_fields(app, what, name, obj, skip, options):
    if name == '_extra_fields':
        return True
    return skip


def setup(app):
    app.connect('autodoc-skip-member', skip_extra_fields)


templates_path = ['_templates']
html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
html_title = f"{project} Documentation"

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'requests': ('https://requests.readthedocs.io/en/latest/', None),
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_include_private_with_doc = False
napoleon_use_admonition_for_examples = True
napoleon_use_ivar = True
napoleon_use_param = True
napoleon_use_rtype = True
