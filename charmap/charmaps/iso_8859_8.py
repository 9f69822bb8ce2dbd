"""ISO/IEC 8859-8 (Latin/Hebrew, visual order)."""

NAME = "ISO-8859-8"
ALIASES = ("8859-8", "ISO8859-8", "HEBREW")

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
    "\x80"    # 0x80 -> U+0080 PADDING CHARACTER
    "\x81"    # 0x81 -> U+0081 HIGH OCTET PRESET
    "\x82"    # 0x82 -> U+0082 BREAK PERMITTED HERE
    "\x83"    # 0x83 -> U+0083 NO BREAK HERE
    "\x84"    # 0x84 -> U+0084 INDEX
    "\x85"    # 0x85 -> U+0085 NEXT LINE
    "\x86"    # 0x86 -> U+0086 START OF SELECTED AREA
    "\x87"    # 0x87 -> U+0087 END OF SELECTED AREA
    "\x88"    # 0x88 -> U+0088 CHARACTER TABULATION SET
    "\x89"    # 0x89 -> U+0089 CHARACTER TABULATION WITH JUSTIFICATION
    "\x8a"    # 0x8A -> U+008A LINE TABULATION SET
    "\x8b"    # 0x8B -> U+008B PARTIAL LINE FORWARD
    "\x8c"    # 0x8C -> U+008C PARTIAL LINE BACKWARD
    "\x8d"    # 0x8D -> U+008D REVERSE LINE FEED
    "\x8e"    # 0x8E -> U+008E SINGLE SHIFT TWO
    "\x8f"    # 0x8F -> U+008F SINGLE SHIFT THREE
    "\x90"    # 0x90 -> U+0090 DEVICE CONTROL STRING
    "\x91"    # 0x91 -> U+0091 PRIVATE USE ONE
    "\x92"    # 0x92 -> U+0092 PRIVATE USE TWO
    "\x93"    # 0x93 -> U+0093 SET TRANSMIT STATE
    "\x94"    # 0x94 -> U+0094 CANCEL CHARACTER
    "\x95"    # 0x95 -> U+0095 MESSAGE WAITING
    "\x96"    # 0x96 -> U+0096 START OF GUARDED AREA
    "\x97"    # 0x97 -> U+0097 END OF GUARDED AREA
    "\x98"    # 0x98 -> U+0098 START OF STRING
    "\x99"    # 0x99 -> U+0099 SINGLE GRAPHIC CHARACTER INTRODUCER
    "\x9a"    # 0x9A -> U+009A SINGLE CHARACTER INTRODUCER
    "\x9b"    # 0x9B -> U+009B CONTROL SEQUENCE INTRODUCER
    "\x9c"    # 0x9C -> U+009C STRING TERMINATOR
    "\x9d"    # 0x9D -> U+009D OPERATING SYSTEM COMMAND
    "\x9e"    # 0x9E -> U+009E PRIVACY MESSAGE
    "\x9f"    # 0x9F -> U+009F APPLICATION PROGRAM COMMAND
    "\xa0"    # 0xA0 -> U+00A0 NO-BREAK SPACE
    "\ufffe"  # 0xA1 -> UNDEFINED
    "\xa2"    # 0xA2 -> U+00A2 CENT SIGN
    "\xa3"    # 0xA3 -> U+00A3 POUND SIGN
    "\xa4"    # 0xA4 -> U+00A4 CURRENCY SIGN
    "\xa5"    # 0xA5 -> U+00A5 YEN SIGN
    "\xa6"    # 0xA6 -> U+00A6 BROKEN BAR
    "\xa7"    # 0xA7 -> U+00A7 SECTION SIGN
    "\xa8"    # 0xA8 -> U+00A8 DIAERESIS
    "\xa9"    # 0xA9 -> U+00A9 COPYRIGHT SIGN
    "\xd7"    # 0xAA -> U+00D7 MULTIPLICATION SIGN
    "\xab"    # 0xAB -> U+00AB LEFT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\xac"    # 0xAC -> U+00AC NOT SIGN
    "\xad"    # 0xAD -> U+00AD SOFT HYPHEN
    "\xae"    # 0xAE -> U+00AE REGISTERED SIGN
    "\xaf"    # 0xAF -> U+00AF MACRON
    "\xb0"    # 0xB0 -> U+00B0 DEGREE SIGN
    "\xb1"    # 0xB1 -> U+00B1 PLUS-MINUS SIGN
    "\xb2"    # 0xB2 -> U+00B2 SUPERSCRIPT TWO
    "\xb3"    # 0xB3 -> U+00B3 SUPERSCRIPT THREE
    "\xb4"    # 0xB4 -> U+00B4 ACUTE ACCENT
    "\xb5"    # 0xB5 -> U+00B5 MICRO SIGN
    "\xb6"    # 0xB6 -> U+00B6 PILCROW SIGN
    "\xb7"    # 0xB7 -> U+00B7 MIDDLE DOT
    "\xb8"    # 0xB8 -> U+00B8 CEDILLA
    "\xb9"    # 0xB9 -> U+00B9 SUPERSCRIPT ONE
    "\xf7"    # 0xBA -> U+00F7 DIVISION SIGN
    "\xbb"    # 0xBB -> U+00BB RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\xbc"    # 0xBC -> U+00BC VULGAR FRACTION ONE QUARTER
    "\xbd"    # 0xBD -> U+00BD VULGAR FRACTION ONE HALF
    "\xbe"    # 0xBE -> U+00BE VULGAR FRACTION THREE QUARTERS
    "\ufffe"  # 0xBF -> UNDEFINED
    "\ufffe"  # 0xC0 -> UNDEFINED
    "\ufffe"  # 0xC1 -> UNDEFINED
    "\ufffe"  # 0xC2 -> UNDEFINED
    "\ufffe"  # 0xC3 -> UNDEFINED
    "\ufffe"  # 0xC4 -> UNDEFINED
    "\ufffe"  # 0xC5 -> UNDEFINED
    "\ufffe"  # 0xC6 -> UNDEFINED
    "\ufffe"  # 0xC7 -> UNDEFINED
    "\ufffe"  # 0xC8 -> UNDEFINED
    "\ufffe"  # 0xC9 -> UNDEFINED
    "\ufffe"  # 0xCA -> UNDEFINED
    "\ufffe"  # 0xCB -> UNDEFINED
    "\ufffe"  # 0xCC -> UNDEFINED
    "\ufffe"  # 0xCD -> UNDEFINED
    "\ufffe"  # 0xCE -> UNDEFINED
    "\ufffe"  # 0xCF -> UNDEFINED
    "\ufffe"  # 0xD0 -> UNDEFINED
    "\ufffe"  # 0xD1 -> UNDEFINED
    "\ufffe"  # 0xD2 -> UNDEFINED
    "\ufffe"  # 0xD3 -> UNDEFINED
    "\ufffe"  # 0xD4 -> UNDEFINED
    "\ufffe"  # 0xD5 -> UNDEFINED
    "\ufffe"  # 0xD6 -> UNDEFINED
    "\ufffe"  # 0xD7 -> UNDEFINED
    "\ufffe"  # 0xD8 -> UNDEFINED
    "\ufffe"  # 0xD9 -> UNDEFINED
    "\ufffe"  # 0xDA -> UNDEFINED
    "\ufffe"  # 0xDB -> UNDEFINED
    "\ufffe"  # 0xDC -> UNDEFINED
    "\ufffe"  # 0xDD -> UNDEFINED
    "\ufffe"  # 0xDE -> UNDEFINED
    "\u2017"  # 0xDF -> U+2017 DOUBLE LOW LINE
    "\u05d0"  # 0xE0 -> U+05D0 HEBREW LETTER ALEF
    "\u05d1"  # 0xE1 -> U+05D1 HEBREW LETTER BET
    "\u05d2"  # 0xE2 -> U+05D2 HEBREW LETTER GIMEL
    "\u05d3"  # 0xE3 -> U+05D3 HEBREW LETTER DALET
    "\u05d4"  # 0xE4 -> U+05D4 HEBREW LETTER HE
    "\u05d5"  # 0xE5 -> U+05D5 HEBREW LETTER VAV
    "\u05d6"  # 0xE6 -> U+05D6 HEBREW LETTER ZAYIN
    "\u05d7"  # 0xE7 -> U+05D7 HEBREW LETTER HET
    "\u05d8"  # 0xE8 -> U+05D8 HEBREW LETTER TET
    "\u05d9"  # 0xE9 -> U+05D9 HEBREW LETTER YOD
    "\u05da"  # 0xEA -> U+05DA HEBREW LETTER FINAL KAF
    "\u05db"  # 0xEB -> U+05DB HEBREW LETTER KAF
    "\u05dc"  # 0xEC -> U+05DC HEBREW LETTER LAMED
    "\u05dd"  # 0xED -> U+05DD HEBREW LETTER FINAL MEM
    "\u05de"  # 0xEE -> U+05DE HEBREW LETTER MEM
    "\u05df"  # 0xEF -> U+05DF HEBREW LETTER FINAL NUN
    "\u05e0"  # 0xF0 -> U+05E0 HEBREW LETTER NUN
    "\u05e1"  # 0xF1 -> U+05E1 HEBREW LETTER SAMEKH
    "\u05e2"  # 0xF2 -> U+05E2 HEBREW LETTER AYIN
    "\u05e3"  # 0xF3 -> U+05E3 HEBREW LETTER FINAL PE
    "\u05e4"  # 0xF4 -> U+05E4 HEBREW LETTER PE
    "\u05e5"  # 0xF5 -> U+05E5 HEBREW LETTER FINAL TSADI
    "\u05e6"  # 0xF6 -> U+05E6 HEBREW LETTER TSADI
    "\u05e7"  # 0xF7 -> U+05E7 HEBREW LETTER QOF
    "\u05e8"  # 0xF8 -> U+05E8 HEBREW LETTER RESH
    "\u05e9"  # 0xF9 -> U+05E9 HEBREW LETTER SHIN
    "\u05ea"  # 0xFA -> U+05EA HEBREW LETTER TAV
    "\ufffe"  # 0xFB -> UNDEFINED
    "\ufffe"  # 0xFC -> UNDEFINED
    "\u200e"  # 0xFD -> U+200E LEFT-TO-RIGHT MARK
    "\u200f"  # 0xFE -> U+200F RIGHT-TO-LEFT MARK
    "\ufffe"  # 0xFF -> UNDEFINED
)
