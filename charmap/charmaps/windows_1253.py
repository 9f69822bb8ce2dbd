"""Windows code page 1253 (Greek)."""

NAME = "WINDOWS-1253"
ALIASES = ("CP1253",)

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
    "\u0192"  # 0x83 -> U+0192 LATIN SMALL LETTER F WITH HOOK
    "\u201e"  # 0x84 -> U+201E DOUBLE LOW-9 QUOTATION MARK
    "\u2026"  # 0x85 -> U+2026 HORIZONTAL ELLIPSIS
    "\u2020"  # 0x86 -> U+2020 DAGGER
    "\u2021"  # 0x87 -> U+2021 DOUBLE DAGGER
    "\ufffe"  # 0x88 -> UNDEFINED
    "\u2030"  # 0x89 -> U+2030 PER MILLE SIGN
    "\ufffe"  # 0x8A -> UNDEFINED
    "\u2039"  # 0x8B -> U+2039 SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    "\ufffe"  # 0x8C -> UNDEFINED
    "\ufffe"  # 0x8D -> UNDEFINED
    "\ufffe"  # 0x8E -> UNDEFINED
    "\ufffe"  # 0x8F -> UNDEFINED
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
    "\ufffe"  # 0x9D -> UNDEFINED
    "\ufffe"  # 0x9E -> UNDEFINED
    "\ufffe"  # 0x9F -> UNDEFINED
    "\xa0"    # 0xA0 -> U+00A0 NO-BREAK SPACE
    "\u0385"  # 0xA1 -> U+0385 GREEK DIALYTIKA TONOS
    "\u0386"  # 0xA2 -> U+0386 GREEK CAPITAL LETTER ALPHA WITH TONOS
    "\xa3"    # 0xA3 -> U+00A3 POUND SIGN
    "\xa4"    # 0xA4 -> U+00A4 CURRENCY SIGN
    "\xa5"    # 0xA5 -> U+00A5 YEN SIGN
    "\xa6"    # 0xA6 -> U+00A6 BROKEN BAR
    "\xa7"    # 0xA7 -> U+00A7 SECTION SIGN
    "\xa8"    # 0xA8 -> U+00A8 DIAERESIS
    "\xa9"    # 0xA9 -> U+00A9 COPYRIGHT SIGN
    "\ufffe"  # 0xAA -> UNDEFINED
    "\xab"    # 0xAB -> U+00AB LEFT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\xac"    # 0xAC -> U+00AC NOT SIGN
    "\xad"    # 0xAD -> U+00AD SOFT HYPHEN
    "\xae"    # 0xAE -> U+00AE REGISTERED SIGN
    "\u2015"  # 0xAF -> U+2015 HORIZONTAL BAR
    "\xb0"    # 0xB0 -> U+00B0 DEGREE SIGN
    "\xb1"    # 0xB1 -> U+00B1 PLUS-MINUS SIGN
    "\xb2"    # 0xB2 -> U+00B2 SUPERSCRIPT TWO
    "\xb3"    # 0xB3 -> U+00B3 SUPERSCRIPT THREE
    "\u0384"  # 0xB4 -> U+0384 GREEK TONOS
    "\xb5"    # 0xB5 -> U+00B5 MICRO SIGN
    "\xb6"    # 0xB6 -> U+00B6 PILCROW SIGN
    "\xb7"    # 0xB7 -> U+00B7 MIDDLE DOT
    "\u0388"  # 0xB8 -> U+0388 GREEK CAPITAL LETTER EPSILON WITH TONOS
    "\u0389"  # 0xB9 -> U+0389 GREEK CAPITAL LETTER ETA WITH TONOS
    "\u038a"  # 0xBA -> U+038A GREEK CAPITAL LETTER IOTA WITH TONOS
    "\xbb"    # 0xBB -> U+00BB RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\u038c"  # 0xBC -> U+038C GREEK CAPITAL LETTER OMICRON WITH TONOS
    "\xbd"    # 0xBD -> U+00BD VULGAR FRACTION ONE HALF
    "\u038e"  # 0xBE -> U+038E GREEK CAPITAL LETTER UPSILON WITH TONOS
    "\u038f"  # 0xBF -> U+038F GREEK CAPITAL LETTER OMEGA WITH TONOS
    "\u0390"  # 0xC0 -> U+0390 GREEK SMALL LETTER IOTA WITH DIALYTIKA AND TONOS
    "\u0391"  # 0xC1 -> U+0391 GREEK CAPITAL LETTER ALPHA
    "\u0392"  # 0xC2 -> U+0392 GREEK CAPITAL LETTER BETA
    "\u0393"  # 0xC3 -> U+0393 GREEK CAPITAL LETTER GAMMA
    "\u0394"  # 0xC4 -> U+0394 GREEK CAPITAL LETTER DELTA
    "\u0395"  # 0xC5 -> U+0395 GREEK CAPITAL LETTER EPSILON
    "\u0396"  # 0xC6 -> U+0396 GREEK CAPITAL LETTER ZETA
    "\u0397"  # 0xC7 -> U+0397 GREEK CAPITAL LETTER ETA
    "\u0398"  # 0xC8 -> U+0398 GREEK CAPITAL LETTER THETA
    "\u0399"  # 0xC9 -> U+0399 GREEK CAPITAL LETTER IOTA
    "\u039a"  # 0xCA -> U+039A GREEK CAPITAL LETTER KAPPA
    "\u039b"  # 0xCB -> U+039B GREEK CAPITAL LETTER LAMDA
    "\u039c"  # 0xCC -> U+039C GREEK CAPITAL LETTER MU
    "\u039d"  # 0xCD -> U+039D GREEK CAPITAL LETTER NU
    "\u039e"  # 0xCE -> U+039E GREEK CAPITAL LETTER XI
    "\u039f"  # 0xCF -> U+039F GREEK CAPITAL LETTER OMICRON
    "\u03a0"  # 0xD0 -> U+03A0 GREEK CAPITAL LETTER PI
    "\u03a1"  # 0xD1 -> U+03A1 GREEK CAPITAL LETTER RHO
    "\ufffe"  # 0xD2 -> UNDEFINED
    "\u03a3"  # 0xD3 -> U+03A3 GREEK CAPITAL LETTER SIGMA
    "\u03a4"  # 0xD4 -> U+03A4 GREEK CAPITAL LETTER TAU
    "\u03a5"  # 0xD5 -> U+03A5 GREEK CAPITAL LETTER UPSILON
    "\u03a6"  # 0xD6 -> U+03A6 GREEK CAPITAL LETTER PHI
    "\u03a7"  # 0xD7 -> U+03A7 GREEK CAPITAL LETTER CHI
    "\u03a8"  # 0xD8 -> U+03A8 GREEK CAPITAL LETTER PSI
    "\u03a9"  # 0xD9 -> U+03A9 GREEK CAPITAL LETTER OMEGA
    "\u03aa"  # 0xDA -> U+03AA GREEK CAPITAL LETTER IOTA WITH DIALYTIKA
    "\u03ab"  # 0xDB -> U+03AB GREEK CAPITAL LETTER UPSILON WITH DIALYTIKA
    "\u03ac"  # 0xDC -> U+03AC GREEK SMALL LETTER ALPHA WITH TONOS
    "\u03ad"  # 0xDD -> U+03AD GREEK SMALL LETTER EPSILON WITH TONOS
    "\u03ae"  # 0xDE -> U+03AE GREEK SMALL LETTER ETA WITH TONOS
    "\u03af"  # 0xDF -> U+03AF GREEK SMALL LETTER IOTA WITH TONOS
    "\u03b0"  # 0xE0 -> U+03B0 GREEK SMALL LETTER UPSILON WITH DIALYTIKA AND TONOS
    "\u03b1"  # 0xE1 -> U+03B1 GREEK SMALL LETTER ALPHA
    "\u03b2"  # 0xE2 -> U+03B2 GREEK SMALL LETTER BETA
    "\u03b3"  # 0xE3 -> U+03B3 GREEK SMALL LETTER GAMMA
    "\u03b4"  # 0xE4 -> U+03B4 GREEK SMALL LETTER DELTA
    "\u03b5"  # 0xE5 -> U+03B5 GREEK SMALL LETTER EPSILON
    "\u03b6"  # 0xE6 -> U+03B6 GREEK SMALL LETTER ZETA
    "\u03b7"  # 0xE7 -> U+03B7 GREEK SMALL LETTER ETA
    "\u03b8"  # 0xE8 -> U+03B8 GREEK SMALL LETTER THETA
    "\u03b9"  # 0xE9 -> U+03B9 GREEK SMALL LETTER IOTA
    "\u03ba"  # 0xEA -> U+03BA GREEK SMALL LETTER KAPPA
    "\u03bb"  # 0xEB -> U+03BB GREEK SMALL LETTER LAMDA
    "\u03bc"  # 0xEC -> U+03BC GREEK SMALL LETTER MU
    "\u03bd"  # 0xED -> U+03BD GREEK SMALL LETTER NU
    "\u03be"  # 0xEE -> U+03BE GREEK SMALL LETTER XI
    "\u03bf"  # 0xEF -> U+03BF GREEK SMALL LETTER OMICRON
    "\u03c0"  # 0xF0 -> U+03C0 GREEK SMALL LETTER PI
    "\u03c1"  # 0xF1 -> U+03C1 GREEK SMALL LETTER RHO
    "\u03c2"  # 0xF2 -> U+03C2 GREEK SMALL LETTER FINAL SIGMA
    "\u03c3"  # 0xF3 -> U+03C3 GREEK SMALL LETTER SIGMA
    "\u03c4"  # 0xF4 -> U+03C4 GREEK SMALL LETTER TAU
    "\u03c5"  # 0xF5 -> U+03C5 GREEK SMALL LETTER UPSILON
    "\u03c6"  # 0xF6 -> U+03C6 GREEK SMALL LETTER PHI
    "\u03c7"  # 0xF7 -> U+03C7 GREEK SMALL LETTER CHI
    "\u03c8"  # 0xF8 -> U+03C8 GREEK SMALL LETTER PSI
    "\u03c9"  # 0xF9 -> U+03C9 GREEK SMALL LETTER OMEGA
    "\u03ca"  # 0xFA -> U+03CA GREEK SMALL LETTER IOTA WITH DIALYTIKA
    "\u03cb"  # 0xFB -> U+03CB GREEK SMALL LETTER UPSILON WITH DIALYTIKA
    "\u03cc"  # 0xFC -> U+03CC GREEK SMALL LETTER OMICRON WITH TONOS
    "\u03cd"  # 0xFD -> U+03CD GREEK SMALL LETTER UPSILON WITH TONOS
    "\u03ce"  # 0xFE -> U+03CE GREEK SMALL LETTER OMEGA WITH TONOS
    "\ufffe"  # 0xFF -> UNDEFINED
)
