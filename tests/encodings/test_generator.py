import io
import re
import sys

import pytest

from charmap.charmaps import iso_8859_2, iso_8859_3, koi8_r
from tests.encodings import generator

table_line_re = re.compile(
    r'^    ".*"\s+# 0x(?P<byte>[0-9A-F]{2}) -> (?:U\+(?P<codepoint>[0-9A-F]{4,6}) (?P<name>.*)|UNDEFINED)$'
)

MAPPING_FILE = """\
#
#	Name:             test to Unicode table
#
0x41	0x0041	#LATIN CAPITAL LETTER A
0xA1	0x0104	#	LATIN CAPITAL LETTER A WITH OGONEK
0x81	      	#UNDEFINED
0xA2	0x02D8
"""


def parse_module(module):
    with open(module.__file__, encoding="utf-8") as f:
        source = f.read()

    mapping = {}
    for line in source.splitlines():
        match = table_line_re.match(line)
        if match and match.group("codepoint"):
            mapping[int(match.group("byte"), 16)] = (
                int(match.group("codepoint"), 16),
                match.group("name"),
            )
    title = source.splitlines()[0][3:-4]
    return source, title, mapping


def test_read_mapping():
    mapping = generator.read_mapping(io.StringIO(MAPPING_FILE))

    assert mapping == {
        0x41: (0x41, "LATIN CAPITAL LETTER A"),
        0xA1: (0x0104, "LATIN CAPITAL LETTER A WITH OGONEK"),
        0xA2: (0x02D8, "BREVE"),
    }


def test_read_mapping_rejects_garbage():
    with pytest.raises(ValueError):
        generator.read_mapping(io.StringIO("A1 -> 0104\n"))


def test_find_duplicates():
    mapping = {0x41: (0x41, "A"), 0x61: (0x41, "A"), 0x62: (0x62, "b")}

    assert generator.find_duplicates(mapping) == [(0x41, 0x41, 0x61)]


@pytest.mark.parametrize(
    "codepoint,expected",
    [
        (0x41, "A"),
        (0x22, '\\"'),
        (0x5C, "\\\\"),
        (0x00, "\\x00"),
        (0xA0, "\\xa0"),
        (0x0104, "\\u0104"),
    ],
)
def test_literal(codepoint, expected):
    assert generator.literal(codepoint) == expected


@pytest.mark.parametrize("module", [iso_8859_2, iso_8859_3, koi8_r])
def test_output_reproduces_shipped_tables(module):
    source, title, mapping = parse_module(module)
    f = io.StringIO()

    generator.output(module.NAME, list(module.ALIASES), title, mapping, f)

    assert f.getvalue() == source


def test_main_writes_module(tmp_path, monkeypatch, capsys):
    mapping_file = tmp_path / "TEST.TXT"
    mapping_file.write_text(MAPPING_FILE)
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "generator.py",
            str(mapping_file),
            "--name",
            "test_enc",
            "--alias",
            "t_1",
            "--title",
            "Test encoding",
            "-o",
            str(tmp_path),
        ],
    )

    generator.main()

    source = (tmp_path / "test_enc.py").read_text(encoding="utf-8")
    assert 'NAME = "TEST-ENC"' in source
    assert 'ALIASES = ("T-1",)' in source
    assert '    "\\u0104"  # 0xA1 -> U+0104 LATIN CAPITAL LETTER A WITH OGONEK' in source
    assert '    "\\ufffe"  # 0x81 -> UNDEFINED' in source
    assert "TEST-ENC: 3 bytes mapped" in capsys.readouterr().out


def test_main_refuses_duplicates(tmp_path, monkeypatch):
    mapping_file = tmp_path / "DUP.TXT"
    mapping_file.write_text("0x41\t0x0041\t#A\n0x61\t0x0041\t#A\n")
    monkeypatch.setattr(
        sys,
        "argv",
        ["generator.py", str(mapping_file), "-n", "DUP", "-t", "Dup", "-o", str(tmp_path)],
    )

    with pytest.raises(SystemExit):
        generator.main()

    assert not (tmp_path / "dup.py").exists()
