"""ISO/IEC 8859-11 (Latin/Thai)."""

NAME = "ISO-8859-11"
ALIASES = ("8859-11", "ISO8859-11")

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
    "\u0e01"  # 0xA1 -> U+0E01 THAI CHARACTER KO KAI
    "\u0e02"  # 0xA2 -> U+0E02 THAI CHARACTER KHO KHAI
    "\u0e03"  # 0xA3 -> U+0E03 THAI CHARACTER KHO KHUAT
    "\u0e04"  # 0xA4 -> U+0E04 THAI CHARACTER KHO KHWAI
    "\u0e05"  # 0xA5 -> U+0E05 THAI CHARACTER KHO KHON
    "\u0e06"  # 0xA6 -> U+0E06 THAI CHARACTER KHO RAKHANG
    "\u0e07"  # 0xA7 -> U+0E07 THAI CHARACTER NGO NGU
    "\u0e08"  # 0xA8 -> U+0E08 THAI CHARACTER CHO CHAN
    "\u0e09"  # 0xA9 -> U+0E09 THAI CHARACTER CHO CHING
    "\u0e0a"  # 0xAA -> U+0E0A THAI CHARACTER CHO CHANG
    "\u0e0b"  # 0xAB -> U+0E0B THAI CHARACTER SO SO
    "\u0e0c"  # 0xAC -> U+0E0C THAI CHARACTER CHO CHOE
    "\u0e0d"  # 0xAD -> U+0E0D THAI CHARACTER YO YING
    "\u0e0e"  # 0xAE -> U+0E0E THAI CHARACTER DO CHADA
    "\u0e0f"  # 0xAF -> U+0E0F THAI CHARACTER TO PATAK
    "\u0e10"  # 0xB0 -> U+0E10 THAI CHARACTER THO THAN
    "\u0e11"  # 0xB1 -> U+0E11 THAI CHARACTER THO NANGMONTHO
    "\u0e12"  # 0xB2 -> U+0E12 THAI CHARACTER THO PHUTHAO
    "\u0e13"  # 0xB3 -> U+0E13 THAI CHARACTER NO NEN
    "\u0e14"  # 0xB4 -> U+0E14 THAI CHARACTER DO DEK
    "\u0e15"  # 0xB5 -> U+0E15 THAI CHARACTER TO TAO
    "\u0e16"  # 0xB6 -> U+0E16 THAI CHARACTER THO THUNG
    "\u0e17"  # 0xB7 -> U+0E17 THAI CHARACTER THO THAHAN
    "\u0e18"  # 0xB8 -> U+0E18 THAI CHARACTER THO THONG
    "\u0e19"  # 0xB9 -> U+0E19 THAI CHARACTER NO NU
    "\u0e1a"  # 0xBA -> U+0E1A THAI CHARACTER BO BAIMAI
    "\u0e1b"  # 0xBB -> U+0E1B THAI CHARACTER PO PLA
    "\u0e1c"  # 0xBC -> U+0E1C THAI CHARACTER PHO PHUNG
    "\u0e1d"  # 0xBD -> U+0E1D THAI CHARACTER FO FA
    "\u0e1e"  # 0xBE -> U+0E1E THAI CHARACTER PHO PHAN
    "\u0e1f"  # 0xBF -> U+0E1F THAI CHARACTER FO FAN
    "\u0e20"  # 0xC0 -> U+0E20 THAI CHARACTER PHO SAMPHAO
    "\u0e21"  # 0xC1 -> U+0E21 THAI CHARACTER MO MA
    "\u0e22"  # 0xC2 -> U+0E22 THAI CHARACTER YO YAK
    "\u0e23"  # 0xC3 -> U+0E23 THAI CHARACTER RO RUA
    "\u0e24"  # 0xC4 -> U+0E24 THAI CHARACTER RU
    "\u0e25"  # 0xC5 -> U+0E25 THAI CHARACTER LO LING
    "\u0e26"  # 0xC6 -> U+0E26 THAI CHARACTER LU
    "\u0e27"  # 0xC7 -> U+0E27 THAI CHARACTER WO WAEN
    "\u0e28"  # 0xC8 -> U+0E28 THAI CHARACTER SO SALA
    "\u0e29"  # 0xC9 -> U+0E29 THAI CHARACTER SO RUSI
    "\u0e2a"  # 0xCA -> U+0E2A THAI CHARACTER SO SUA
    "\u0e2b"  # 0xCB -> U+0E2B THAI CHARACTER HO HIP
    "\u0e2c"  # 0xCC -> U+0E2C THAI CHARACTER LO CHULA
    "\u0e2d"  # 0xCD -> U+0E2D THAI CHARACTER O ANG
    "\u0e2e"  # 0xCE -> U+0E2E THAI CHARACTER HO NOKHUK
    "\u0e2f"  # 0xCF -> U+0E2F THAI CHARACTER PAIYANNOI
    "\u0e30"  # 0xD0 -> U+0E30 THAI CHARACTER SARA A
    "\u0e31"  # 0xD1 -> U+0E31 THAI CHARACTER MAI HAN-AKAT
    "\u0e32"  # 0xD2 -> U+0E32 THAI CHARACTER SARA AA
    "\u0e33"  # 0xD3 -> U+0E33 THAI CHARACTER SARA AM
    "\u0e34"  # 0xD4 -> U+0E34 THAI CHARACTER SARA I
    "\u0e35"  # 0xD5 -> U+0E35 THAI CHARACTER SARA II
    "\u0e36"  # 0xD6 -> U+0E36 THAI CHARACTER SARA UE
    "\u0e37"  # 0xD7 -> U+0E37 THAI CHARACTER SARA UEE
    "\u0e38"  # 0xD8 -> U+0E38 THAI CHARACTER SARA U
    "\u0e39"  # 0xD9 -> U+0E39 THAI CHARACTER SARA UU
    "\u0e3a"  # 0xDA -> U+0E3A THAI CHARACTER PHINTHU
    "\ufffe"  # 0xDB -> UNDEFINED
    "\ufffe"  # 0xDC -> UNDEFINED
    "\ufffe"  # 0xDD -> UNDEFINED
    "\ufffe"  # 0xDE -> UNDEFINED
    "\u0e3f"  # 0xDF -> U+0E3F THAI CURRENCY SYMBOL BAHT
    "\u0e40"  # 0xE0 -> U+0E40 THAI CHARACTER SARA E
    "\u0e41"  # 0xE1 -> U+0E41 THAI CHARACTER SARA AE
    "\u0e42"  # 0xE2 -> U+0E42 THAI CHARACTER SARA O
    "\u0e43"  # 0xE3 -> U+0E43 THAI CHARACTER SARA AI MAIMUAN
    "\u0e44"  # 0xE4 -> U+0E44 THAI CHARACTER SARA AI MAIMALAI
    "\u0e45"  # 0xE5 -> U+0E45 THAI CHARACTER LAKKHANGYAO
    "\u0e46"  # 0xE6 -> U+0E46 THAI CHARACTER MAIYAMOK
    "\u0e47"  # 0xE7 -> U+0E47 THAI CHARACTER MAITAIKHU
    "\u0e48"  # 0xE8 -> U+0E48 THAI CHARACTER MAI EK
    "\u0e49"  # 0xE9 -> U+0E49 THAI CHARACTER MAI THO
    "\u0e4a"  # 0xEA -> U+0E4A THAI CHARACTER MAI TRI
    "\u0e4b"  # 0xEB -> U+0E4B THAI CHARACTER MAI CHATTAWA
    "\u0e4c"  # 0xEC -> U+0E4C THAI CHARACTER THANTHAKHAT
    "\u0e4d"  # 0xED -> U+0E4D THAI CHARACTER NIKHAHIT
    "\u0e4e"  # 0xEE -> U+0E4E THAI CHARACTER YAMAKKAN
    "\u0e4f"  # 0xEF -> U+0E4F THAI CHARACTER FONGMAN
    "\u0e50"  # 0xF0 -> U+0E50 THAI DIGIT ZERO
    "\u0e51"  # 0xF1 -> U+0E51 THAI DIGIT ONE
    "\u0e52"  # 0xF2 -> U+0E52 THAI DIGIT TWO
    "\u0e53"  # 0xF3 -> U+0E53 THAI DIGIT THREE
    "\u0e54"  # 0xF4 -> U+0E54 THAI DIGIT FOUR
    "\u0e55"  # 0xF5 -> U+0E55 THAI DIGIT FIVE
    "\u0e56"  # 0xF6 -> U+0E56 THAI DIGIT SIX
    "\u0e57"  # 0xF7 -> U+0E57 THAI DIGIT SEVEN
    "\u0e58"  # 0xF8 -> U+0E58 THAI DIGIT EIGHT
    "\u0e59"  # 0xF9 -> U+0E59 THAI DIGIT NINE
    "\u0e5a"  # 0xFA -> U+0E5A THAI CHARACTER ANGKHANKHU
    "\u0e5b"  # 0xFB -> U+0E5B THAI CHARACTER KHOMUT
    "\ufffe"  # 0xFC -> UNDEFINED
    "\ufffe"  # 0xFD -> UNDEFINED
    "\ufffe"  # 0xFE -> UNDEFINED
    "\ufffe"  # 0xFF -> UNDEFINED
)
