# from distutils.core import setup
from Cython.Build import cythonize
from setuptools import setup, Extension
import numpy as np


# hot loops are plain Python modules; Cython compiles them in place
extensions = [
    Extension(
        name="strcomplex.lz.trie",              # full dotted module path
        sources=["strcomplex/lz/trie.py"],
        include_dirs=[np.get_include()],
    ),
    Extension(
        name="strcomplex.lz.lz77",
        sources=["strcomplex/lz/lz77.py"],
        include_dirs=[np.get_include()],
    ),
    Extension(
        name="strcomplex.index.lcp",
        sources=["strcomplex/index/lcp.py"],
        include_dirs=[np.get_include()],
    ),
]

ext_modules = cythonize(
    extensions,
    compiler_directives={"language_level": "3", "annotation_typing": False},
)
# without a C compiler the same modules are imported as Python source
for ext in ext_modules:
    ext.optional = True

setup(
    ext_modules=ext_modules,
    zip_safe=False,
)
