import os
import sys
from importlib.metadata import PackageNotFoundError, version

sys.path.insert(0, os.path.abspath("../../src"))

project = "PySATL Calc"
author = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
copyright = f"2025, {author}"
try:
    release = version("pysatl-calc")
except PackageNotFoundError:
    release = "0.0.1a0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx_rtd_theme",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]
exclude_patterns = ["_build"]

# -- Napoleon (NumPy style docstrings) --
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = True
napoleon_use_rtype = True
napoleon_preprocess_types = True

# -- Autodocumentation settings --
autodoc_default_options = {
    "member-order": "bysource",
    "undoc-members": True,
    "show-inheritance": True,
}
autodoc_typehints = "description"
autodoc_typehints_format = "short"

autodoc_type_aliases = {
    "Number": "pysatl_calc.types.Number",
    "ParameterValues": "pysatl_calc.distributions.parameters.ParameterValues",
    "NumericalSettings": "pysatl_calc.distributions.config.NumericalSettings",
    "RandomSource": "pysatl_calc.distributions.generators.RandomSource",
    "ProbabilityDistribution": "pysatl_calc.distributions.distribution.ProbabilityDistribution",
}

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
    "sympy": ("https://docs.sympy.org/latest/", None),
}

# -- HTML --
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "navigation_depth": 4,
}

copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True
