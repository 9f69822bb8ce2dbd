"""ISO/IEC 8859-2 (Latin-2, Central European)."""

NAME = "ISO-8859-2"
ALIASES = ("8859-2", "ISO8859-2", "LATIN2", "L2")

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
    "\u0104"  # 0xA1 -> U+0104 LATIN CAPITAL LETTER A WITH OGONEK
    "\u02d8"  # 0xA2 -> U+02D8 BREVE
    "\u0141"  # 0xA3 -> U+0141 LATIN CAPITAL LETTER L WITH STROKE
    "\xa4"    # 0xA4 -> U+00A4 CURRENCY SIGN
    "\u013d"  # 0xA5 -> U+013D LATIN CAPITAL LETTER L WITH CARON
    "\u015a"  # 0xA6 -> U+015A LATIN CAPITAL LETTER S WITH ACUTE
    "\xa7"    # 0xA7 -> U+00A7 SECTION SIGN
    "\xa8"    # 0xA8 -> U+00A8 DIAERESIS
    "\u0160"  # 0xA9 -> U+0160 LATIN CAPITAL LETTER S WITH CARON
    "\u015e"  # 0xAA -> U+015E LATIN CAPITAL LETTER S WITH CEDILLA
    "\u0164"  # 0xAB -> U+0164 LATIN CAPITAL LETTER T WITH CARON
    "\u0179"  # 0xAC -> U+0179 LATIN CAPITAL LETTER Z WITH ACUTE
    "\xad"    # 0xAD -> U+00AD SOFT HYPHEN
    "\u017d"  # 0xAE -> U+017D LATIN CAPITAL LETTER Z WITH CARON
    "\u017b"  # 0xAF -> U+017B LATIN CAPITAL LETTER Z WITH DOT ABOVE
    "\xb0"    # 0xB0 -> U+00B0 DEGREE SIGN
    "\u0105"  # 0xB1 -> U+0105 LATIN SMALL LETTER A WITH OGONEK
    "\u02db"  # 0xB2 -> U+02DB OGONEK
    "\u0142"  # 0xB3 -> U+0142 LATIN SMALL LETTER L WITH STROKE
    "\xb4"    # 0xB4 -> U+00B4 ACUTE ACCENT
    "\u013e"  # 0xB5 -> U+013E LATIN SMALL LETTER L WITH CARON
    "\u015b"  # 0xB6 -> U+015B LATIN SMALL LETTER S WITH ACUTE
    "\u02c7"  # 0xB7 -> U+02C7 CARON
    "\xb8"    # 0xB8 -> U+00B8 CEDILLA
    "\u0161"  # 0xB9 -> U+0161 LATIN SMALL LETTER S WITH CARON
    "\u015f"  # 0xBA -> U+015F LATIN SMALL LETTER S WITH CEDILLA
    "\u0165"  # 0xBB -> U+0165 LATIN SMALL LETTER T WITH CARON
    "\u017a"  # 0xBC -> U+017A LATIN SMALL LETTER Z WITH ACUTE
    "\u02dd"  # 0xBD -> U+02DD DOUBLE ACUTE ACCENT
    "\u017e"  # 0xBE -> U+017E LATIN SMALL LETTER Z WITH CARON
    "\u017c"  # 0xBF -> U+017C LATIN SMALL LETTER Z WITH DOT ABOVE
    "\u0154"  # 0xC0 -> U+0154 LATIN CAPITAL LETTER R WITH ACUTE
    "\xc1"    # 0xC1 -> U+00C1 LATIN CAPITAL LETTER A WITH ACUTE
    "\xc2"    # 0xC2 -> U+00C2 LATIN CAPITAL LETTER A WITH CIRCUMFLEX
    "\u0102"  # 0xC3 -> U+0102 LATIN CAPITAL LETTER A WITH BREVE
    "\xc4"    # 0xC4 -> U+00C4 LATIN CAPITAL LETTER A WITH DIAERESIS
    "\u0139"  # 0xC5 -> U+0139 LATIN CAPITAL LETTER L WITH ACUTE
    "\u0106"  # 0xC6 -> U+0106 LATIN CAPITAL LETTER C WITH ACUTE
    "\xc7"    # 0xC7 -> U+00C7 LATIN CAPITAL LETTER C WITH CEDILLA
    "\u010c"  # 0xC8 -> U+010C LATIN CAPITAL LETTER C WITH CARON
    "\xc9"    # 0xC9 -> U+00C9 LATIN CAPITAL LETTER E WITH ACUTE
    "\u0118"  # 0xCA -> U+0118 LATIN CAPITAL LETTER E WITH OGONEK
    "\xcb"    # 0xCB -> U+00CB LATIN CAPITAL LETTER E WITH DIAERESIS
    "\u011a"  # 0xCC -> U+011A LATIN CAPITAL LETTER E WITH CARON
    "\xcd"    # 0xCD -> U+00CD LATIN CAPITAL LETTER I WITH ACUTE
    "\xce"    # 0xCE -> U+00CE LATIN CAPITAL LETTER I WITH CIRCUMFLEX
    "\u010e"  # 0xCF -> U+010E LATIN CAPITAL LETTER D WITH CARON
    "\u0110"  # 0xD0 -> U+0110 LATIN CAPITAL LETTER D WITH STROKE
    "\u0143"  # 0xD1 -> U+0143 LATIN CAPITAL LETTER N WITH ACUTE
    "\u0147"  # 0xD2 -> U+0147 LATIN CAPITAL LETTER N WITH CARON
    "\xd3"    # 0xD3 -> U+00D3 LATIN CAPITAL LETTER O WITH ACUTE
    "\xd4"    # 0xD4 -> U+00D4 LATIN CAPITAL LETTER O WITH CIRCUMFLEX
    "\u0150"  # 0xD5 -> U+0150 LATIN CAPITAL LETTER O WITH DOUBLE ACUTE
    "\xd6"    # 0xD6 -> U+00D6 LATIN CAPITAL LETTER O WITH DIAERESIS
    "\xd7"    # 0xD7 -> U+00D7 MULTIPLICATION SIGN
    "\u0158"  # 0xD8 -> U+0158 LATIN CAPITAL LETTER R WITH CARON
    "\u016e"  # 0xD9 -> U+016E LATIN CAPITAL LETTER U WITH RING ABOVE
    "\xda"    # 0xDA -> U+00DA LATIN CAPITAL LETTER U WITH ACUTE
    "\u0170"  # 0xDB -> U+0170 LATIN CAPITAL LETTER U WITH DOUBLE ACUTE
    "\xdc"    # 0xDC -> U+00DC LATIN CAPITAL LETTER U WITH DIAERESIS
    "\xdd"    # 0xDD -> U+00DD LATIN CAPITAL LETTER Y WITH ACUTE
    "\u0162"  # 0xDE -> U+0162 LATIN CAPITAL LETTER T WITH CEDILLA
    "\xdf"    # 0xDF -> U+00DF LATIN SMALL LETTER SHARP S
    "\u0155"  # 0xE0 -> U+0155 LATIN SMALL LETTER R WITH ACUTE
    "\xe1"    # 0xE1 -> U+00E1 LATIN SMALL LETTER A WITH ACUTE
    "\xe2"    # 0xE2 -> U+00E2 LATIN SMALL LETTER A WITH CIRCUMFLEX
    "\u0103"  # 0xE3 -> U+0103 LATIN SMALL LETTER A WITH BREVE
    "\xe4"    # 0xE4 -> U+00E4 LATIN SMALL LETTER A WITH DIAERESIS
    "\u013a"  # 0xE5 -> U+013A LATIN SMALL LETTER L WITH ACUTE
    "\u0107"  # 0xE6 -> U+0107 LATIN SMALL LETTER C WITH ACUTE
    "\xe7"    # 0xE7 -> U+00E7 LATIN SMALL LETTER C WITH CEDILLA
    "\u010d"  # 0xE8 -> U+010D LATIN SMALL LETTER C WITH CARON
    "\xe9"    # 0xE9 -> U+00E9 LATIN SMALL LETTER E WITH ACUTE
    "\u0119"  # 0xEA -> U+0119 LATIN SMALL LETTER E WITH OGONEK
    "\xeb"    # 0xEB -> U+00EB LATIN SMALL LETTER E WITH DIAERESIS
    "\u011b"  # 0xEC -> U+011B LATIN SMALL LETTER E WITH CARON
    "\xed"    # 0xED -> U+00ED LATIN SMALL LETTER I WITH ACUTE
    "\xee"    # 0xEE -> U+00EE LATIN SMALL LETTER I WITH CIRCUMFLEX
    "\u010f"  # 0xEF -> U+010F LATIN SMALL LETTER D WITH CARON
    "\u0111"  # 0xF0 -> U+0111 LATIN SMALL LETTER D WITH STROKE
    "\u0144"  # 0xF1 -> U+0144 LATIN SMALL LETTER N WITH ACUTE
    "\u0148"  # 0xF2 -> U+0148 LATIN SMALL LETTER N WITH CARON
    "\xf3"    # 0xF3 -> U+00F3 LATIN SMALL LETTER O WITH ACUTE
    "\xf4"    # 0xF4 -> U+00F4 LATIN SMALL LETTER O WITH CIRCUMFLEX
    "\u0151"  # 0xF5 -> U+0151 LATIN SMALL LETTER O WITH DOUBLE ACUTE
    "\xf6"    # 0xF6 -> U+00F6 LATIN SMALL LETTER O WITH DIAERESIS
    "\xf7"    # 0xF7 -> U+00F7 DIVISION SIGN
    "\u0159"  # 0xF8 -> U+0159 LATIN SMALL LETTER R WITH CARON
    "\u016f"  # 0xF9 -> U+016F LATIN SMALL LETTER U WITH RING ABOVE
    "\xfa"    # 0xFA -> U+00FA LATIN SMALL LETTER U WITH ACUTE
    "\u0171"  # 0xFB -> U+0171 LATIN SMALL LETTER U WITH DOUBLE ACUTE
    "\xfc"    # 0xFC -> U+00FC LATIN SMALL LETTER U WITH DIAERESIS
    "\xfd"    # 0xFD -> U+00FD LATIN SMALL LETTER Y WITH ACUTE
    "\u0163"  # 0xFE -> U+0163 LATIN SMALL LETTER T WITH CEDILLA
    "\u02d9"  # 0xFF -> U+02D9 DOT ABOVE
)
