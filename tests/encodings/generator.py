#!/usr/bin/env python3
# Generator for charmap mapping tables
#
# Reads a mapping file in the unicode.org format
#   0xA1	0x0104	#	LATIN CAPITAL LETTER A WITH OGONEK
# and writes charmap/charmaps/<name>.py
#
# ./generator.py 8859-2.TXT --name ISO-8859-2 --alias 8859-2 --alias ISO8859-2 \
#     --title "ISO/IEC 8859-2 (Latin-2, Central European)"

import argparse
import os
import re
import sys
import unicodedata

from slugify import slugify

OUTPUT_DIR = os.path.join(os.path.dirname(__file__), "../../charmap/charmaps")

line_re = re.compile(
    r"^\s*0x(?P<byte>[0-9a-fA-F]{2})\s+(?:0x(?P<codepoint>[0-9a-fA-F]{4,6}))?\s*(?:#\s*(?P<name>.*))?$"
)


def read_mapping(f):
    mapping = {}
    for line in f:
        if not line.strip() or line.lstrip().startswith("#"):
            continue

        match = line_re.match(line.rstrip("\n"))
        if not match:
            raise ValueError("Unparsable mapping line: {!r}".format(line))

        if match.group("codepoint") is None:  # byte listed but unassigned
            continue

        byte = int(match.group("byte"), 16)
        codepoint = int(match.group("codepoint"), 16)
        name = (match.group("name") or "").strip()
        mapping[byte] = (codepoint, name or unicodedata.name(chr(codepoint), "<control>"))

    return mapping


def find_duplicates(mapping):
    seen = {}
    duplicates = []
    for byte in sorted(mapping):
        codepoint = mapping[byte][0]
        if codepoint in seen:
            duplicates.append((codepoint, seen[codepoint], byte))
        else:
            seen[codepoint] = byte
    return duplicates


def literal(codepoint):
    char = chr(codepoint)
    if char in ('"', "\\"):
        return "\\" + char
    if 0x20 <= codepoint < 0x7F:
        return char
    if codepoint < 0x100:
        return "\\x{:02x}".format(codepoint)
    return "\\u{:04x}".format(codepoint)


def output(name, aliases, title, mapping, f):
    print('"""{}."""'.format(title), file=f)
    print(file=f)
    print('NAME = "{}"'.format(name), file=f)
    quoted = ", ".join('"{}"'.format(alias) for alias in aliases)
    print("ALIASES = ({}{})".format(quoted, "," if len(aliases) == 1 else ""), file=f)
    print(file=f)
    print("charmap = (", file=f)
    for byte in range(256):
        if byte not in mapping:
            print('    "\\ufffe"  # 0x{:02X} -> UNDEFINED'.format(byte), file=f)
            continue

        codepoint, char_name = mapping[byte]
        lit = literal(codepoint)
        print(
            '    "{}"{}  # 0x{:02X} -> U+{:04X} {}'.format(
                lit, " " * (6 - len(lit)), byte, codepoint, char_name
            ),
            file=f,
        )
    print(")", file=f)


def main():
    parser = argparse.ArgumentParser(description="Generate a charmap mapping table module")
    parser.add_argument("mapping", type=argparse.FileType("r"), help="unicode.org style mapping file")
    parser.add_argument("-n", "--name", required=True, help="canonical encoding name, e.g. ISO-8859-2")
    parser.add_argument("-a", "--alias", dest="aliases", action="append", default=[], help="alias, repeatable")
    parser.add_argument("-t", "--title", required=True, help="one line description")
    parser.add_argument("-o", "--output-dir", default=OUTPUT_DIR, help="Default charmap/charmaps")

    args = parser.parse_args()

    name = args.name.upper().replace("_", "-")
    mapping = read_mapping(args.mapping)

    duplicates = find_duplicates(mapping)
    if duplicates:
        for codepoint, first, second in duplicates:
            sys.stderr.write(
                "U+{:04X} is mapped from both 0x{:02X} and 0x{:02X}\n".format(codepoint, first, second)
            )
        sys.stderr.write("ERROR: {} is not injective, fix the mapping file\n".format(name))
        sys.exit(1)

    filename = os.path.join(args.output_dir, slugify(name, separator="_") + ".py")
    with open(filename, "w", encoding="utf-8") as f:
        output(name, [a.upper().replace("_", "-") for a in args.aliases], args.title, mapping, f)

    print("{}: {} bytes mapped, written to {}".format(name, len(mapping), filename))
    print("Add the module to CHARMAPS in charmap/charmaps/__init__.py to register it")


if __name__ == "__main__":
    main()
