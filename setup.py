"""Build script for the grove trie modules.

The package ships as plain top-level modules (``trie``, ``trie_node``,
``slot_index``, ``trie_errors``).  The only runtime dependency is
``bitarray``, which backs the slot-occupancy mask of dense nodes.
"""

from setuptools import setup


def _read_long_description() -> str:
    """Return the design notes as the long description, if present."""
    try:
        with open("DESIGN.md", encoding="utf-8") as f:
            return f.read()
    except OSError:
        return ""


setup(
    name="grove-trie",
    version="0.1.0",
    description="Mutable sparse and fixed-degree prefix trees over symbol sequences",
    long_description=_read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    py_modules=["trie", "trie_node", "slot_index", "trie_errors"],
    install_requires=["bitarray>=2.0"],
    extras_require={"test": ["pytest"]},
)
