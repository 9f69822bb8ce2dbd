"""Windows code page 1251 (Cyrillic)."""

NAME = "WINDOWS-1251"
ALIASES = ("CP1251",)

charmap = (
    "\x00"    # 0x00 -> U+0000 NULL
    "\x01"    # 0x01 -> U+0001 START OF HEADING
    "\x02"    # 0x02 -> U+0002 START OF TEXT
    "\x03"    # 0x03 -> U+0003 END OF TEXT
    "\x04"    # 0x04 -> U+0004 END OF TRANSMISSION
    "\x05"    # 0x05 -> U+0005 ENQUIRY
    "\x06"    # 0x06 -> U+0006 ACKNOWLEDGE
    "\x07"    # 0x07 -> U+0007 ALERT
    "\x08"    # 0x08 -> U+0008 BACKSPACE
    "\x09"    # 0x09 -> U+0009 CHARACTER TABULATION
    "\x0a"    # 0x0A -> U+000A LINE FEED
    "\x0b"    # 0x0B -> U+000B LINE TABULATION
    "\x0c"    # 0x0C -> U+000C FORM FEED
    "\x0d"    # 0x0D -> U+000D CARRIAGE RETURN
    "\x0e"    # 0x0E -> U+000E SHIFT OUT
    "\x0f"    # 0x0F -> U+000F SHIFT IN
    "\x10"    # 0x10 -> U+0010 DATA LINK ESCAPE
    "\x11"    # 0x11 -> U+0011 DEVICE CONTROL ONE
    "\x12"    # 0x12 -> U+0012 DEVICE CONTROL TWO
    "\x13"    # 0x13 -> U+0013 DEVICE CONTROL THREE
    "\x14"    # 0x14 -> U+0014 DEVICE CONTROL FOUR
    "\x15"    # 0x15 -> U+0015 NEGATIVE ACKNOWLEDGE
    "\x16"    # 0x16 -> U+0016 SYNCHRONOUS IDLE
    "\x17"    # 0x17 -> U+0017 END OF TRANSMISSION BLOCK
    "\x18"    # 0x18 -> U+0018 CANCEL
    "\x19"    # 0x19 -> U+0019 END OF MEDIUM
    "\x1a"    # 0x1A -> U+001A SUBSTITUTE
    "\x1b"    # 0x1B -> U+001B ESCAPE
    "\x1c"    # 0x1C -> U+001C INFORMATION SEPARATOR FOUR
    "\x1d"    # 0x1D -> U+001D INFORMATION SEPARATOR THREE
    "\x1e"    # 0x1E -> U+001E INFORMATION SEPARATOR TWO
    "\x1f"    # 0x1F -> U+001F INFORMATION SEPARATOR ONE
    " "       # 0x20 -> U+0020 SPACE
    "!"       # 0x21 -> U+0021 EXCLAMATION MARK
    "\""      # 0x22 -> U+0022 QUOTATION MARK
    "#"       # 0x23 -> U+0023 NUMBER SIGN
    "$"       # 0x24 -> U+0024 DOLLAR SIGN
    "%"       # 0x25 -> U+0025 PERCENT SIGN
    "&"       # 0x26 -> U+0026 AMPERSAND
    "'"       # 0x27 -> U+0027 APOSTROPHE
    "("       # 0x28 -> U+0028 LEFT PARENTHESIS
    ")"       # 0x29 -> U+0029 RIGHT PARENTHESIS
    "*"       # 0x2A -> U+002A ASTERISK
    "+"       # 0x2B -> U+002B PLUS SIGN
    ","       # 0x2C -> U+002C COMMA
    "-"       # 0x2D -> U+002D HYPHEN-MINUS
    "."       # 0x2E -> U+002E FULL STOP
    "/"       # 0x2F -> U+002F SOLIDUS
    "0"       # 0x30 -> U+0030 DIGIT ZERO
    "1"       # 0x31 -> U+0031 DIGIT ONE
    "2"       # 0x32 -> U+0032 DIGIT TWO
    "3"       # 0x33 -> U+0033 DIGIT THREE
    "4"       # 0x34 -> U+0034 DIGIT FOUR
    "5"       # 0x35 -> U+0035 DIGIT FIVE
    "6"       # 0x36 -> U+0036 DIGIT SIX
    "7"       # 0x37 -> U+0037 DIGIT SEVEN
    "8"       # 0x38 -> U+0038 DIGIT EIGHT
    "9"       # 0x39 -> U+0039 DIGIT NINE
    ":"       # 0x3A -> U+003A COLON
    ";"       # 0x3B -> U+003B SEMICOLON
    "<"       # 0x3C -> U+003C LESS-THAN SIGN
    "="       # 0x3D -> U+003D EQUALS SIGN
    ">"       # 0x3E -> U+003E GREATER-THAN SIGN
    "?"       # 0x3F -> U+003F QUESTION MARK
    "@"       # 0x40 -> U+0040 COMMERCIAL AT
    "A"       # 0x41 -> U+0041 LATIN CAPITAL LETTER A
    "B"       # 0x42 -> U+0042 LATIN CAPITAL LETTER B
    "C"       # 0x43 -> U+0043 LATIN CAPITAL LETTER C
    "D"       # 0x44 -> U+0044 LATIN CAPITAL LETTER D
    "E"       # 0x45 -> U+0045 LATIN CAPITAL LETTER E
    "F"       # 0x46 -> U+0046 LATIN CAPITAL LETTER F
    "G"       # 0x47 -> U+0047 LATIN CAPITAL LETTER G
    "H"       # 0x48 -> U+0048 LATIN CAPITAL LETTER H
    "I"       # 0x49 -> U+0049 LATIN CAPITAL LETTER I
    "J"       # 0x4A -> U+004A LATIN CAPITAL LETTER J
    "K"       # 0x4B -> U+004B LATIN CAPITAL LETTER K
    "L"       # 0x4C -> U+004C LATIN CAPITAL LETTER L
    "M"       # 0x4D -> U+004D LATIN CAPITAL LETTER M
    "N"       # 0x4E -> U+004E LATIN CAPITAL LETTER N
    "O"       # 0x4F -> U+004F LATIN CAPITAL LETTER O
    "P"       # 0x50 -> U+0050 LATIN CAPITAL LETTER P
    "Q"       # 0x51 -> U+0051 LATIN CAPITAL LETTER Q
    "R"       # 0x52 -> U+0052 LATIN CAPITAL LETTER R
    "S"       # 0x53 -> U+0053 LATIN CAPITAL LETTER S
    "T"       # 0x54 -> U+0054 LATIN CAPITAL LETTER T
    "U"       # 0x55 -> U+0055 LATIN CAPITAL LETTER U
    "V"       # 0x56 -> U+0056 LATIN CAPITAL LETTER V
    "W"       # 0x57 -> U+0057 LATIN CAPITAL LETTER W
    "X"       # 0x58 -> U+0058 LATIN CAPITAL LETTER X
    "Y"       # 0x59 -> U+0059 LATIN CAPITAL LETTER Y
    "Z"       # 0x5A -> U+005A LATIN CAPITAL LETTER Z
    "["       # 0x5B -> U+005B LEFT SQUARE BRACKET
    "\\"      # 0x5C -> U+005C REVERSE SOLIDUS
    "]"       # 0x5D -> U+005D RIGHT SQUARE BRACKET
    "^"       # 0x5E -> U+005E CIRCUMFLEX ACCENT
    "_"       # 0x5F -> U+005F LOW LINE
    "`"       # 0x60 -> U+0060 GRAVE ACCENT
    "a"       # 0x61 -> U+0061 LATIN SMALL LETTER A
    "b"       # 0x62 -> U+0062 LATIN SMALL LETTER B
    "c"       # 0x63 -> U+0063 LATIN SMALL LETTER C
    "d"       # 0x64 -> U+0064 LATIN SMALL LETTER D
    "e"       # 0x65 -> U+0065 LATIN SMALL LETTER E
    "f"       # 0x66 -> U+0066 LATIN SMALL LETTER F
    "g"       # 0x67 -> U+0067 LATIN SMALL LETTER G
    "h"       # 0x68 -> U+0068 LATIN SMALL LETTER H
    "i"       # 0x69 -> U+0069 LATIN SMALL LETTER I
    "j"       # 0x6A -> U+006A LATIN SMALL LETTER J
    "k"       # 0x6B -> U+006B LATIN SMALL LETTER K
    "l"       # 0x6C -> U+006C LATIN SMALL LETTER L
    "m"       # 0x6D -> U+006D LATIN SMALL LETTER M
    "n"       # 0x6E -> U+006E LATIN SMALL LETTER N
    "o"       # 0x6F -> U+006F LATIN SMALL LETTER O
    "p"       # 0x70 -> U+0070 LATIN SMALL LETTER P
    "q"       # 0x71 -> U+0071 LATIN SMALL LETTER Q
    "r"       # 0x72 -> U+0072 LATIN SMALL LETTER R
    "s"       # 0x73 -> U+0073 LATIN SMALL LETTER S
    "t"       # 0x74 -> U+0074 LATIN SMALL LETTER T
    "u"       # 0x75 -> U+0075 LATIN SMALL LETTER U
    "v"       # 0x76 -> U+0076 LATIN SMALL LETTER V
    "w"       # 0x77 -> U+0077 LATIN SMALL LETTER W
    "x"       # 0x78 -> U+0078 LATIN SMALL LETTER X
    "y"       # 0x79 -> U+0079 LATIN SMALL LETTER Y
    "z"       # 0x7A -> U+007A LATIN SMALL LETTER Z
    "{"       # 0x7B -> U+007B LEFT CURLY BRACKET
    "|"       # 0x7C -> U+007C VERTICAL LINE
    "}"       # 0x7D -> U+007D RIGHT CURLY BRACKET
    "~"       # 0x7E -> U+007E TILDE
    "\x7f"    # 0x7F -> U+007F DELETE
    "\u0402"  # 0x80 -> U+0402 CYRILLIC CAPITAL LETTER DJE
    "\u0403"  # 0x81 -> U+0403 CYRILLIC CAPITAL LETTER GJE
    "\u201a"  # 0x82 -> U+201A SINGLE LOW-9 QUOTATION MARK
    "\u0453"  # 0x83 -> U+0453 CYRILLIC SMALL LETTER GJE
    "\u201e"  # 0x84 -> U+201E DOUBLE LOW-9 QUOTATION MARK
    "\u2026"  # 0x85 -> U+2026 HORIZONTAL ELLIPSIS
    "\u2020"  # 0x86 -> U+2020 DAGGER
    "\u2021"  # 0x87 -> U+2021 DOUBLE DAGGER
    "\u20ac"  # 0x88 -> U+20AC EURO SIGN
    "\u2030"  # 0x89 -> U+2030 PER MILLE SIGN
    "\u0409"  # 0x8A -> U+0409 CYRILLIC CAPITAL LETTER LJE
    "\u2039"  # 0x8B -> U+2039 SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    "\u040a"  # 0x8C -> U+040A CYRILLIC CAPITAL LETTER NJE
    "\u040c"  # 0x8D -> U+040C CYRILLIC CAPITAL LETTER KJE
    "\u040b"  # 0x8E -> U+040B CYRILLIC CAPITAL LETTER TSHE
    "\u040f"  # 0x8F -> U+040F CYRILLIC CAPITAL LETTER DZHE
    "\u0452"  # 0x90 -> U+0452 CYRILLIC SMALL LETTER DJE
    "\u2018"  # 0x91 -> U+2018 LEFT SINGLE QUOTATION MARK
    "\u2019"  # 0x92 -> U+2019 RIGHT SINGLE QUOTATION MARK
    "\u201c"  # 0x93 -> U+201C LEFT DOUBLE QUOTATION MARK
    "\u201d"  # 0x94 -> U+201D RIGHT DOUBLE QUOTATION MARK
    "\u2022"  # 0x95 -> U+2022 BULLET
    "\u2013"  # 0x96 -> U+2013 EN DASH
    "\u2014"  # 0x97 -> U+2014 EM DASH
    "\ufffe"  # 0x98 -> UNDEFINED
    "\u2122"  # 0x99 -> U+2122 TRADE MARK SIGN
    "\u0459"  # 0x9A -> U+0459 CYRILLIC SMALL LETTER LJE
    "\u203a"  # 0x9B -> U+203A SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    "\u045a"  # 0x9C -> U+045A CYRILLIC SMALL LETTER NJE
    "\u045c"  # 0x9D -> U+045C CYRILLIC SMALL LETTER KJE
    "\u045b"  # 0x9E -> U+045B CYRILLIC SMALL LETTER TSHE
    "\u045f"  # 0x9F -> U+045F CYRILLIC SMALL LETTER DZHE
    "\xa0"    # 0xA0 -> U+00A0 NO-BREAK SPACE
    "\u040e"  # 0xA1 -> U+040E CYRILLIC CAPITAL LETTER SHORT U
    "\u045e"  # 0xA2 -> U+045E CYRILLIC SMALL LETTER SHORT U
    "\u0408"  # 0xA3 -> U+0408 CYRILLIC CAPITAL LETTER JE
    "\xa4"    # 0xA4 -> U+00A4 CURRENCY SIGN
    "\u0490"  # 0xA5 -> U+0490 CYRILLIC CAPITAL LETTER GHE WITH UPTURN
    "\xa6"    # 0xA6 -> U+00A6 BROKEN BAR
    "\xa7"    # 0xA7 -> U+00A7 SECTION SIGN
    "\u0401"  # 0xA8 -> U+0401 CYRILLIC CAPITAL LETTER IO
    "\xa9"    # 0xA9 -> U+00A9 COPYRIGHT SIGN
    "\u0404"  # 0xAA -> U+0404 CYRILLIC CAPITAL LETTER UKRAINIAN IE
    "\xab"    # 0xAB -> U+00AB LEFT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\xac"    # 0xAC -> U+00AC NOT SIGN
    "\xad"    # 0xAD -> U+00AD SOFT HYPHEN
    "\xae"    # 0xAE -> U+00AE REGISTERED SIGN
    "\u0407"  # 0xAF -> U+0407 CYRILLIC CAPITAL LETTER YI
    "\xb0"    # 0xB0 -> U+00B0 DEGREE SIGN
    "\xb1"    # 0xB1 -> U+00B1 PLUS-MINUS SIGN
    "\u0406"  # 0xB2 -> U+0406 CYRILLIC CAPITAL LETTER BYELORUSSIAN-UKRAINIAN I
    "\u0456"  # 0xB3 -> U+0456 CYRILLIC SMALL LETTER BYELORUSSIAN-UKRAINIAN I
    "\u0491"  # 0xB4 -> U+0491 CYRILLIC SMALL LETTER GHE WITH UPTURN
    "\xb5"    # 0xB5 -> U+00B5 MICRO SIGN
    "\xb6"    # 0xB6 -> U+00B6 PILCROW SIGN
    "\xb7"    # 0xB7 -> U+00B7 MIDDLE DOT
    "\u0451"  # 0xB8 -> U+0451 CYRILLIC SMALL LETTER IO
    "\u2116"  # 0xB9 -> U+2116 NUMERO SIGN
    "\u0454"  # 0xBA -> U+0454 CYRILLIC SMALL LETTER UKRAINIAN IE
    "\xbb"    # 0xBB -> U+00BB RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\u0458"  # 0xBC -> U+0458 CYRILLIC SMALL LETTER JE
    "\u0405"  # 0xBD -> U+0405 CYRILLIC CAPITAL LETTER DZE
    "\u0455"  # 0xBE -> U+0455 CYRILLIC SMALL LETTER DZE
    "\u0457"  # 0xBF -> U+0457 CYRILLIC SMALL LETTER YI
    "\u0410"  # 0xC0 -> U+0410 CYRILLIC CAPITAL LETTER A
    "\u0411"  # 0xC1 -> U+0411 CYRILLIC CAPITAL LETTER BE
    "\u0412"  # 0xC2 -> U+0412 CYRILLIC CAPITAL LETTER VE
    "\u0413"  # 0xC3 -> U+0413 CYRILLIC CAPITAL LETTER GHE
    "\u0414"  # 0xC4 -> U+0414 CYRILLIC CAPITAL LETTER DE
    "\u0415"  # 0xC5 -> U+0415 CYRILLIC CAPITAL LETTER IE
    "\u0416"  # 0xC6 -> U+0416 CYRILLIC CAPITAL LETTER ZHE
    "\u0417"  # 0xC7 -> U+0417 CYRILLIC CAPITAL LETTER ZE
    "\u0418"  # 0xC8 -> U+0418 CYRILLIC CAPITAL LETTER I
    "\u0419"  # 0xC9 -> U+0419 CYRILLIC CAPITAL LETTER SHORT I
    "\u041a"  # 0xCA -> U+041A CYRILLIC CAPITAL LETTER KA
    "\u041b"  # 0xCB -> U+041B CYRILLIC CAPITAL LETTER EL
    "\u041c"  # 0xCC -> U+041C CYRILLIC CAPITAL LETTER EM
    "\u041d"  # 0xCD -> U+041D CYRILLIC CAPITAL LETTER EN
    "\u041e"  # 0xCE -> U+041E CYRILLIC CAPITAL LETTER O
    "\u041f"  # 0xCF -> U+041F CYRILLIC CAPITAL LETTER PE
    "\u0420"  # 0xD0 -> U+0420 CYRILLIC CAPITAL LETTER ER
    "\u0421"  # 0xD1 -> U+0421 CYRILLIC CAPITAL LETTER ES
    "\u0422"  # 0xD2 -> U+0422 CYRILLIC CAPITAL LETTER TE
    "\u0423"  # 0xD3 -> U+0423 CYRILLIC CAPITAL LETTER U
    "\u0424"  # 0xD4 -> U+0424 CYRILLIC CAPITAL LETTER EF
    "\u0425"  # 0xD5 -> U+0425 CYRILLIC CAPITAL LETTER HA
    "\u0426"  # 0xD6 -> U+0426 CYRILLIC CAPITAL LETTER TSE
    "\u0427"  # 0xD7 -> U+0427 CYRILLIC CAPITAL LETTER CHE
    "\u0428"  # 0xD8 -> U+0428 CYRILLIC CAPITAL LETTER SHA
    "\u0429"  # 0xD9 -> U+0429 CYRILLIC CAPITAL LETTER SHCHA
    "\u042a"  # 0xDA -> U+042A CYRILLIC CAPITAL LETTER HARD SIGN
    "\u042b"  # 0xDB -> U+042B CYRILLIC CAPITAL LETTER YERU
    "\u042c"  # 0xDC -> U+042C CYRILLIC CAPITAL LETTER SOFT SIGN
    "\u042d"  # 0xDD -> U+042D CYRILLIC CAPITAL LETTER E
    "\u042e"  # 0xDE -> U+042E CYRILLIC CAPITAL LETTER YU
    "\u042f"  # 0xDF -> U+042F CYRILLIC CAPITAL LETTER YA
    "\u0430"  # 0xE0 -> U+0430 CYRILLIC SMALL LETTER A
    "\u0431"  # 0xE1 -> U+0431 CYRILLIC SMALL LETTER BE
    "\u0432"  # 0xE2 -> U+0432 CYRILLIC SMALL LETTER VE
    "\u0433"  # 0xE3 -> U+0433 CYRILLIC SMALL LETTER GHE
    "\u0434"  # 0xE4 -> U+0434 CYRILLIC SMALL LETTER DE
    "\u0435"  # 0xE5 -> U+0435 CYRILLIC SMALL LETTER IE
    "\u0436"  # 0xE6 -> U+0436 CYRILLIC SMALL LETTER ZHE
    "\u0437"  # 0xE7 -> U+0437 CYRILLIC SMALL LETTER ZE
    "\u0438"  # 0xE8 -> U+0438 CYRILLIC SMALL LETTER I
    "\u0439"  # 0xE9 -> U+0439 CYRILLIC SMALL LETTER SHORT I
    "\u043a"  # 0xEA -> U+043A CYRILLIC SMALL LETTER KA
    "\u043b"  # 0xEB -> U+043B CYRILLIC SMALL LETTER EL
    "\u043c"  # 0xEC -> U+043C CYRILLIC SMALL LETTER EM
    "\u043d"  # 0xED -> U+043D CYRILLIC SMALL LETTER EN
    "\u043e"  # 0xEE -> U+043E CYRILLIC SMALL LETTER O
    "\u043f"  # 0xEF -> U+043F CYRILLIC SMALL LETTER PE
    "\u0440"  # 0xF0 -> U+0440 CYRILLIC SMALL LETTER ER
    "\u0441"  # 0xF1 -> U+0441 CYRILLIC SMALL LETTER ES
    "\u0442"  # 0xF2 -> U+0442 CYRILLIC SMALL LETTER TE
    "\u0443"  # 0xF3 -> U+0443 CYRILLIC SMALL LETTER U
    "\u0444"  # 0xF4 -> U+0444 CYRILLIC SMALL LETTER EF
    "\u0445"  # 0xF5 -> U+0445 CYRILLIC SMALL LETTER HA
    "\u0446"  # 0xF6 -> U+0446 CYRILLIC SMALL LETTER TSE
    "\u0447"  # 0xF7 -> U+0447 CYRILLIC SMALL LETTER CHE
    "\u0448"  # 0xF8 -> U+0448 CYRILLIC SMALL LETTER SHA
    "\u0449"  # 0xF9 -> U+0449 CYRILLIC SMALL LETTER SHCHA
    "\u044a"  # 0xFA -> U+044A CYRILLIC SMALL LETTER HARD SIGN
    "\u044b"  # 0xFB -> U+044B CYRILLIC SMALL LETTER YERU
    "\u044c"  # 0xFC -> U+044C CYRILLIC SMALL LETTER SOFT SIGN
    "\u044d"  # 0xFD -> U+044D CYRILLIC SMALL LETTER E
    "\u044e"  # 0xFE -> U+044E CYRILLIC SMALL LETTER YU
    "\u044f"  # 0xFF -> U+044F CYRILLIC SMALL LETTER YA
)
