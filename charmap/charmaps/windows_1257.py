"""Windows code page 1257 (Baltic)."""

NAME = "WINDOWS-1257"
ALIASES = ("CP1257",)

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
    "\u20ac"  # 0x80 -> U+20AC EURO SIGN
    "\ufffe"  # 0x81 -> UNDEFINED
    "\u201a"  # 0x82 -> U+201A SINGLE LOW-9 QUOTATION MARK
    "\ufffe"  # 0x83 -> UNDEFINED
    "\u201e"  # 0x84 -> U+201E DOUBLE LOW-9 QUOTATION MARK
    "\u2026"  # 0x85 -> U+2026 HORIZONTAL ELLIPSIS
    "\u2020"  # 0x86 -> U+2020 DAGGER
    "\u2021"  # 0x87 -> U+2021 DOUBLE DAGGER
    "\ufffe"  # 0x88 -> UNDEFINED
    "\u2030"  # 0x89 -> U+2030 PER MILLE SIGN
    "\ufffe"  # 0x8A -> UNDEFINED
    "\u2039"  # 0x8B -> U+2039 SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    "\ufffe"  # 0x8C -> UNDEFINED
    "\xa8"    # 0x8D -> U+00A8 DIAERESIS
    "\u02c7"  # 0x8E -> U+02C7 CARON
    "\xb8"    # 0x8F -> U+00B8 CEDILLA
    "\ufffe"  # 0x90 -> UNDEFINED
    "\u2018"  # 0x91 -> U+2018 LEFT SINGLE QUOTATION MARK
    "\u2019"  # 0x92 -> U+2019 RIGHT SINGLE QUOTATION MARK
    "\u201c"  # 0x93 -> U+201C LEFT DOUBLE QUOTATION MARK
    "\u201d"  # 0x94 -> U+201D RIGHT DOUBLE QUOTATION MARK
    "\u2022"  # 0x95 -> U+2022 BULLET
    "\u2013"  # 0x96 -> U+2013 EN DASH
    "\u2014"  # 0x97 -> U+2014 EM DASH
    "\ufffe"  # 0x98 -> UNDEFINED
    "\u2122"  # 0x99 -> U+2122 TRADE MARK SIGN
    "\ufffe"  # 0x9A -> UNDEFINED
    "\u203a"  # 0x9B -> U+203A SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    "\ufffe"  # 0x9C -> UNDEFINED
    "\xaf"    # 0x9D -> U+00AF MACRON
    "\u02db"  # 0x9E -> U+02DB OGONEK
    "\ufffe"  # 0x9F -> UNDEFINED
    "\xa0"    # 0xA0 -> U+00A0 NO-BREAK SPACE
    "\ufffe"  # 0xA1 -> UNDEFINED
    "\xa2"    # 0xA2 -> U+00A2 CENT SIGN
    "\xa3"    # 0xA3 -> U+00A3 POUND SIGN
    "\xa4"    # 0xA4 -> U+00A4 CURRENCY SIGN
    "\ufffe"  # 0xA5 -> UNDEFINED
    "\xa6"    # 0xA6 -> U+00A6 BROKEN BAR
    "\xa7"    # 0xA7 -> U+00A7 SECTION SIGN
    "\xd8"    # 0xA8 -> U+00D8 LATIN CAPITAL LETTER O WITH STROKE
    "\xa9"    # 0xA9 -> U+00A9 COPYRIGHT SIGN
    "\u0156"  # 0xAA -> U+0156 LATIN CAPITAL LETTER R WITH CEDILLA
    "\xab"    # 0xAB -> U+00AB LEFT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\xac"    # 0xAC -> U+00AC NOT SIGN
    "\xad"    # 0xAD -> U+00AD SOFT HYPHEN
    "\xae"    # 0xAE -> U+00AE REGISTERED SIGN
    "\xc6"    # 0xAF -> U+00C6 LATIN CAPITAL LETTER AE
    "\xb0"    # 0xB0 -> U+00B0 DEGREE SIGN
    "\xb1"    # 0xB1 -> U+00B1 PLUS-MINUS SIGN
    "\xb2"    # 0xB2 -> U+00B2 SUPERSCRIPT TWO
    "\xb3"    # 0xB3 -> U+00B3 SUPERSCRIPT THREE
    "\xb4"    # 0xB4 -> U+00B4 ACUTE ACCENT
    "\xb5"    # 0xB5 -> U+00B5 MICRO SIGN
    "\xb6"    # 0xB6 -> U+00B6 PILCROW SIGN
    "\xb7"    # 0xB7 -> U+00B7 MIDDLE DOT
    "\xf8"    # 0xB8 -> U+00F8 LATIN SMALL LETTER O WITH STROKE
    "\xb9"    # 0xB9 -> U+00B9 SUPERSCRIPT ONE
    "\u0157"  # 0xBA -> U+0157 LATIN SMALL LETTER R WITH CEDILLA
    "\xbb"    # 0xBB -> U+00BB RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\xbc"    # 0xBC -> U+00BC VULGAR FRACTION ONE QUARTER
    "\xbd"    # 0xBD -> U+00BD VULGAR FRACTION ONE HALF
    "\xbe"    # 0xBE -> U+00BE VULGAR FRACTION THREE QUARTERS
    "\xe6"    # 0xBF -> U+00E6 LATIN SMALL LETTER AE
    "\u0104"  # 0xC0 -> U+0104 LATIN CAPITAL LETTER A WITH OGONEK
    "\u012e"  # 0xC1 -> U+012E LATIN CAPITAL LETTER I WITH OGONEK
    "\u0100"  # 0xC2 -> U+0100 LATIN CAPITAL LETTER A WITH MACRON
    "\u0106"  # 0xC3 -> U+0106 LATIN CAPITAL LETTER C WITH ACUTE
    "\xc4"    # 0xC4 -> U+00C4 LATIN CAPITAL LETTER A WITH DIAERESIS
    "\xc5"    # 0xC5 -> U+00C5 LATIN CAPITAL LETTER A WITH RING ABOVE
    "\u0118"  # 0xC6 -> U+0118 LATIN CAPITAL LETTER E WITH OGONEK
    "\u0112"  # 0xC7 -> U+0112 LATIN CAPITAL LETTER E WITH MACRON
    "\u010c"  # 0xC8 -> U+010C LATIN CAPITAL LETTER C WITH CARON
    "\xc9"    # 0xC9 -> U+00C9 LATIN CAPITAL LETTER E WITH ACUTE
    "\u0179"  # 0xCA -> U+0179 LATIN CAPITAL LETTER Z WITH ACUTE
    "\u0116"  # 0xCB -> U+0116 LATIN CAPITAL LETTER E WITH DOT ABOVE
    "\u0122"  # 0xCC -> U+0122 LATIN CAPITAL LETTER G WITH CEDILLA
    "\u0136"  # 0xCD -> U+0136 LATIN CAPITAL LETTER K WITH CEDILLA
    "\u012a"  # 0xCE -> U+012A LATIN CAPITAL LETTER I WITH MACRON
    "\u013b"  # 0xCF -> U+013B LATIN CAPITAL LETTER L WITH CEDILLA
    "\u0160"  # 0xD0 -> U+0160 LATIN CAPITAL LETTER S WITH CARON
    "\u0143"  # 0xD1 -> U+0143 LATIN CAPITAL LETTER N WITH ACUTE
    "\u0145"  # 0xD2 -> U+0145 LATIN CAPITAL LETTER N WITH CEDILLA
    "\xd3"    # 0xD3 -> U+00D3 LATIN CAPITAL LETTER O WITH ACUTE
    "\u014c"  # 0xD4 -> U+014C LATIN CAPITAL LETTER O WITH MACRON
    "\xd5"    # 0xD5 -> U+00D5 LATIN CAPITAL LETTER O WITH TILDE
    "\xd6"    # 0xD6 -> U+00D6 LATIN CAPITAL LETTER O WITH DIAERESIS
    "\xd7"    # 0xD7 -> U+00D7 MULTIPLICATION SIGN
    "\u0172"  # 0xD8 -> U+0172 LATIN CAPITAL LETTER U WITH OGONEK
    "\u0141"  # 0xD9 -> U+0141 LATIN CAPITAL LETTER L WITH STROKE
    "\u015a"  # 0xDA -> U+015A LATIN CAPITAL LETTER S WITH ACUTE
    "\u016a"  # 0xDB -> U+016A LATIN CAPITAL LETTER U WITH MACRON
    "\xdc"    # 0xDC -> U+00DC LATIN CAPITAL LETTER U WITH DIAERESIS
    "\u017b"  # 0xDD -> U+017B LATIN CAPITAL LETTER Z WITH DOT ABOVE
    "\u017d"  # 0xDE -> U+017D LATIN CAPITAL LETTER Z WITH CARON
    "\xdf"    # 0xDF -> U+00DF LATIN SMALL LETTER SHARP S
    "\u0105"  # 0xE0 -> U+0105 LATIN SMALL LETTER A WITH OGONEK
    "\u012f"  # 0xE1 -> U+012F LATIN SMALL LETTER I WITH OGONEK
    "\u0101"  # 0xE2 -> U+0101 LATIN SMALL LETTER A WITH MACRON
    "\u0107"  # 0xE3 -> U+0107 LATIN SMALL LETTER C WITH ACUTE
    "\xe4"    # 0xE4 -> U+00E4 LATIN SMALL LETTER A WITH DIAERESIS
    "\xe5"    # 0xE5 -> U+00E5 LATIN SMALL LETTER A WITH RING ABOVE
    "\u0119"  # 0xE6 -> U+0119 LATIN SMALL LETTER E WITH OGONEK
    "\u0113"  # 0xE7 -> U+0113 LATIN SMALL LETTER E WITH MACRON
    "\u010d"  # 0xE8 -> U+010D LATIN SMALL LETTER C WITH CARON
    "\xe9"    # 0xE9 -> U+00E9 LATIN SMALL LETTER E WITH ACUTE
    "\u017a"  # 0xEA -> U+017A LATIN SMALL LETTER Z WITH ACUTE
    "\u0117"  # 0xEB -> U+0117 LATIN SMALL LETTER E WITH DOT ABOVE
    "\u0123"  # 0xEC -> U+0123 LATIN SMALL LETTER G WITH CEDILLA
    "\u0137"  # 0xED -> U+0137 LATIN SMALL LETTER K WITH CEDILLA
    "\u012b"  # 0xEE -> U+012B LATIN SMALL LETTER I WITH MACRON
    "\u013c"  # 0xEF -> U+013C LATIN SMALL LETTER L WITH CEDILLA
    "\u0161"  # 0xF0 -> U+0161 LATIN SMALL LETTER S WITH CARON
    "\u0144"  # 0xF1 -> U+0144 LATIN SMALL LETTER N WITH ACUTE
    "\u0146"  # 0xF2 -> U+0146 LATIN SMALL LETTER N WITH CEDILLA
    "\xf3"    # 0xF3 -> U+00F3 LATIN SMALL LETTER O WITH ACUTE
    "\u014d"  # 0xF4 -> U+014D LATIN SMALL LETTER O WITH MACRON
    "\xf5"    # 0xF5 -> U+00F5 LATIN SMALL LETTER O WITH TILDE
    "\xf6"    # 0xF6 -> U+00F6 LATIN SMALL LETTER O WITH DIAERESIS
    "\xf7"    # 0xF7 -> U+00F7 DIVISION SIGN
    "\u0173"  # 0xF8 -> U+0173 LATIN SMALL LETTER U WITH OGONEK
    "\u0142"  # 0xF9 -> U+0142 LATIN SMALL LETTER L WITH STROKE
    "\u015b"  # 0xFA -> U+015B LATIN SMALL LETTER S WITH ACUTE
    "\u016b"  # 0xFB -> U+016B LATIN SMALL LETTER U WITH MACRON
    "\xfc"    # 0xFC -> U+00FC LATIN SMALL LETTER U WITH DIAERESIS
    "\u017c"  # 0xFD -> U+017C LATIN SMALL LETTER Z WITH DOT ABOVE
    "\u017e"  # 0xFE -> U+017E LATIN SMALL LETTER Z WITH CARON
    "\u02d9"  # 0xFF -> U+02D9 DOT ABOVE
)
