"""ISO/IEC 8859-10 (Latin-6, Nordic)."""

NAME = "ISO-8859-10"
ALIASES = ("8859-10", "ISO8859-10", "LATIN6", "L6")

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
    "\u0112"  # 0xA2 -> U+0112 LATIN CAPITAL LETTER E WITH MACRON
    "\u0122"  # 0xA3 -> U+0122 LATIN CAPITAL LETTER G WITH CEDILLA
    "\u012a"  # 0xA4 -> U+012A LATIN CAPITAL LETTER I WITH MACRON
    "\u0128"  # 0xA5 -> U+0128 LATIN CAPITAL LETTER I WITH TILDE
    "\u0136"  # 0xA6 -> U+0136 LATIN CAPITAL LETTER K WITH CEDILLA
    "\xa7"    # 0xA7 -> U+00A7 SECTION SIGN
    "\u013b"  # 0xA8 -> U+013B LATIN CAPITAL LETTER L WITH CEDILLA
    "\u0110"  # 0xA9 -> U+0110 LATIN CAPITAL LETTER D WITH STROKE
    "\u0160"  # 0xAA -> U+0160 LATIN CAPITAL LETTER S WITH CARON
    "\u0166"  # 0xAB -> U+0166 LATIN CAPITAL LETTER T WITH STROKE
    "\u017d"  # 0xAC -> U+017D LATIN CAPITAL LETTER Z WITH CARON
    "\xad"    # 0xAD -> U+00AD SOFT HYPHEN
    "\u016a"  # 0xAE -> U+016A LATIN CAPITAL LETTER U WITH MACRON
    "\u014a"  # 0xAF -> U+014A LATIN CAPITAL LETTER ENG
    "\xb0"    # 0xB0 -> U+00B0 DEGREE SIGN
    "\u0105"  # 0xB1 -> U+0105 LATIN SMALL LETTER A WITH OGONEK
    "\u0113"  # 0xB2 -> U+0113 LATIN SMALL LETTER E WITH MACRON
    "\u0123"  # 0xB3 -> U+0123 LATIN SMALL LETTER G WITH CEDILLA
    "\u012b"  # 0xB4 -> U+012B LATIN SMALL LETTER I WITH MACRON
    "\u0129"  # 0xB5 -> U+0129 LATIN SMALL LETTER I WITH TILDE
    "\u0137"  # 0xB6 -> U+0137 LATIN SMALL LETTER K WITH CEDILLA
    "\xb7"    # 0xB7 -> U+00B7 MIDDLE DOT
    "\u013c"  # 0xB8 -> U+013C LATIN SMALL LETTER L WITH CEDILLA
    "\u0111"  # 0xB9 -> U+0111 LATIN SMALL LETTER D WITH STROKE
    "\u0161"  # 0xBA -> U+0161 LATIN SMALL LETTER S WITH CARON
    "\u0167"  # 0xBB -> U+0167 LATIN SMALL LETTER T WITH STROKE
    "\u017e"  # 0xBC -> U+017E LATIN SMALL LETTER Z WITH CARON
    "\u2015"  # 0xBD -> U+2015 HORIZONTAL BAR
    "\u016b"  # 0xBE -> U+016B LATIN SMALL LETTER U WITH MACRON
    "\u014b"  # 0xBF -> U+014B LATIN SMALL LETTER ENG
    "\u0100"  # 0xC0 -> U+0100 LATIN CAPITAL LETTER A WITH MACRON
    "\xc1"    # 0xC1 -> U+00C1 LATIN CAPITAL LETTER A WITH ACUTE
    "\xc2"    # 0xC2 -> U+00C2 LATIN CAPITAL LETTER A WITH CIRCUMFLEX
    "\xc3"    # 0xC3 -> U+00C3 LATIN CAPITAL LETTER A WITH TILDE
    "\xc4"    # 0xC4 -> U+00C4 LATIN CAPITAL LETTER A WITH DIAERESIS
    "\xc5"    # 0xC5 -> U+00C5 LATIN CAPITAL LETTER A WITH RING ABOVE
    "\xc6"    # 0xC6 -> U+00C6 LATIN CAPITAL LETTER AE
    "\u012e"  # 0xC7 -> U+012E LATIN CAPITAL LETTER I WITH OGONEK
    "\u010c"  # 0xC8 -> U+010C LATIN CAPITAL LETTER C WITH CARON
    "\xc9"    # 0xC9 -> U+00C9 LATIN CAPITAL LETTER E WITH ACUTE
    "\u0118"  # 0xCA -> U+0118 LATIN CAPITAL LETTER E WITH OGONEK
    "\xcb"    # 0xCB -> U+00CB LATIN CAPITAL LETTER E WITH DIAERESIS
    "\u0116"  # 0xCC -> U+0116 LATIN CAPITAL LETTER E WITH DOT ABOVE
    "\xcd"    # 0xCD -> U+00CD LATIN CAPITAL LETTER I WITH ACUTE
    "\xce"    # 0xCE -> U+00CE LATIN CAPITAL LETTER I WITH CIRCUMFLEX
    "\xcf"    # 0xCF -> U+00CF LATIN CAPITAL LETTER I WITH DIAERESIS
    "\xd0"    # 0xD0 -> U+00D0 LATIN CAPITAL LETTER ETH
    "\u0145"  # 0xD1 -> U+0145 LATIN CAPITAL LETTER N WITH CEDILLA
    "\u014c"  # 0xD2 -> U+014C LATIN CAPITAL LETTER O WITH MACRON
    "\xd3"    # 0xD3 -> U+00D3 LATIN CAPITAL LETTER O WITH ACUTE
    "\xd4"    # 0xD4 -> U+00D4 LATIN CAPITAL LETTER O WITH CIRCUMFLEX
    "\xd5"    # 0xD5 -> U+00D5 LATIN CAPITAL LETTER O WITH TILDE
    "\xd6"    # 0xD6 -> U+00D6 LATIN CAPITAL LETTER O WITH DIAERESIS
    "\u0168"  # 0xD7 -> U+0168 LATIN CAPITAL LETTER U WITH TILDE
    "\xd8"    # 0xD8 -> U+00D8 LATIN CAPITAL LETTER O WITH STROKE
    "\u0172"  # 0xD9 -> U+0172 LATIN CAPITAL LETTER U WITH OGONEK
    "\xda"    # 0xDA -> U+00DA LATIN CAPITAL LETTER U WITH ACUTE
    "\xdb"    # 0xDB -> U+00DB LATIN CAPITAL LETTER U WITH CIRCUMFLEX
    "\xdc"    # 0xDC -> U+00DC LATIN CAPITAL LETTER U WITH DIAERESIS
    "\xdd"    # 0xDD -> U+00DD LATIN CAPITAL LETTER Y WITH ACUTE
    "\xde"    # 0xDE -> U+00DE LATIN CAPITAL LETTER THORN
    "\xdf"    # 0xDF -> U+00DF LATIN SMALL LETTER SHARP S
    "\u0101"  # 0xE0 -> U+0101 LATIN SMALL LETTER A WITH MACRON
    "\xe1"    # 0xE1 -> U+00E1 LATIN SMALL LETTER A WITH ACUTE
    "\xe2"    # 0xE2 -> U+00E2 LATIN SMALL LETTER A WITH CIRCUMFLEX
    "\xe3"    # 0xE3 -> U+00E3 LATIN SMALL LETTER A WITH TILDE
    "\xe4"    # 0xE4 -> U+00E4 LATIN SMALL LETTER A WITH DIAERESIS
    "\xe5"    # 0xE5 -> U+00E5 LATIN SMALL LETTER A WITH RING ABOVE
    "\xe6"    # 0xE6 -> U+00E6 LATIN SMALL LETTER AE
    "\u012f"  # 0xE7 -> U+012F LATIN SMALL LETTER I WITH OGONEK
    "\u010d"  # 0xE8 -> U+010D LATIN SMALL LETTER C WITH CARON
    "\xe9"    # 0xE9 -> U+00E9 LATIN SMALL LETTER E WITH ACUTE
    "\u0119"  # 0xEA -> U+0119 LATIN SMALL LETTER E WITH OGONEK
    "\xeb"    # 0xEB -> U+00EB LATIN SMALL LETTER E WITH DIAERESIS
    "\u0117"  # 0xEC -> U+0117 LATIN SMALL LETTER E WITH DOT ABOVE
    "\xed"    # 0xED -> U+00ED LATIN SMALL LETTER I WITH ACUTE
    "\xee"    # 0xEE -> U+00EE LATIN SMALL LETTER I WITH CIRCUMFLEX
    "\xef"    # 0xEF -> U+00EF LATIN SMALL LETTER I WITH DIAERESIS
    "\xf0"    # 0xF0 -> U+00F0 LATIN SMALL LETTER ETH
    "\u0146"  # 0xF1 -> U+0146 LATIN SMALL LETTER N WITH CEDILLA
    "\u014d"  # 0xF2 -> U+014D LATIN SMALL LETTER O WITH MACRON
    "\xf3"    # 0xF3 -> U+00F3 LATIN SMALL LETTER O WITH ACUTE
    "\xf4"    # 0xF4 -> U+00F4 LATIN SMALL LETTER O WITH CIRCUMFLEX
    "\xf5"    # 0xF5 -> U+00F5 LATIN SMALL LETTER O WITH TILDE
    "\xf6"    # 0xF6 -> U+00F6 LATIN SMALL LETTER O WITH DIAERESIS
    "\u0169"  # 0xF7 -> U+0169 LATIN SMALL LETTER U WITH TILDE
    "\xf8"    # 0xF8 -> U+00F8 LATIN SMALL LETTER O WITH STROKE
    "\u0173"  # 0xF9 -> U+0173 LATIN SMALL LETTER U WITH OGONEK
    "\xfa"    # 0xFA -> U+00FA LATIN SMALL LETTER U WITH ACUTE
    "\xfb"    # 0xFB -> U+00FB LATIN SMALL LETTER U WITH CIRCUMFLEX
    "\xfc"    # 0xFC -> U+00FC LATIN SMALL LETTER U WITH DIAERESIS
    "\xfd"    # 0xFD -> U+00FD LATIN SMALL LETTER Y WITH ACUTE
    "\xfe"    # 0xFE -> U+00FE LATIN SMALL LETTER THORN
    "\u0138"  # 0xFF -> U+0138 LATIN SMALL LETTER KRA
)
