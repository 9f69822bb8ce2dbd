"""Mapping tables, one module per encoding.

Each module defines ``NAME`` (canonical name), ``ALIASES`` and ``charmap``, a
256 character string indexed by byte value where "\\ufffe" marks an unassigned
byte. The modules are generated by tests/encodings/generator.py and are not
edited by hand.
"""
from importlib import import_module

# Registration order of the default bootstrap
CHARMAPS = (
    "iso_8859_1",
    "iso_8859_2",
    "iso_8859_3",
    "iso_8859_4",
    "iso_8859_5",
    "iso_8859_6",
    "iso_8859_7",
    "iso_8859_8",
    "iso_8859_9",
    "iso_8859_10",
    "iso_8859_11",
    "iso_8859_13",
    "iso_8859_14",
    "iso_8859_15",
    "iso_8859_16",
    "windows_1250",
    "windows_1251",
    "windows_1252",
    "windows_1253",
    "windows_1254",
    "windows_1256",
    "windows_1257",
    "koi8_r",
    "koi8_u",
    "ibm437",
    "ibm850",
    "ibm866",
)


def load_charmap(module_name: str):
    return import_module("." + module_name, __name__)
