"""Windows code page 1256 (Arabic)."""

NAME = "WINDOWS-1256"
ALIASES = ("CP1256",)

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
    "\u067e"  # 0x81 -> U+067E ARABIC LETTER PEH
    "\u201a"  # 0x82 -> U+201A SINGLE LOW-9 QUOTATION MARK
    "\u0192"  # 0x83 -> U+0192 LATIN SMALL LETTER F WITH HOOK
    "\u201e"  # 0x84 -> U+201E DOUBLE LOW-9 QUOTATION MARK
    "\u2026"  # 0x85 -> U+2026 HORIZONTAL ELLIPSIS
    "\u2020"  # 0x86 -> U+2020 DAGGER
    "\u2021"  # 0x87 -> U+2021 DOUBLE DAGGER
    "\u02c6"  # 0x88 -> U+02C6 MODIFIER LETTER CIRCUMFLEX ACCENT
    "\u2030"  # 0x89 -> U+2030 PER MILLE SIGN
    "\u0679"  # 0x8A -> U+0679 ARABIC LETTER TTEH
    "\u2039"  # 0x8B -> U+2039 SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    "\u0152"  # 0x8C -> U+0152 LATIN CAPITAL LIGATURE OE
    "\u0686"  # 0x8D -> U+0686 ARABIC LETTER TCHEH
    "\u0698"  # 0x8E -> U+0698 ARABIC LETTER JEH
    "\u0688"  # 0x8F -> U+0688 ARABIC LETTER DDAL
    "\u06af"  # 0x90 -> U+06AF ARABIC LETTER GAF
    "\u2018"  # 0x91 -> U+2018 LEFT SINGLE QUOTATION MARK
    "\u2019"  # 0x92 -> U+2019 RIGHT SINGLE QUOTATION MARK
    "\u201c"  # 0x93 -> U+201C LEFT DOUBLE QUOTATION MARK
    "\u201d"  # 0x94 -> U+201D RIGHT DOUBLE QUOTATION MARK
    "\u2022"  # 0x95 -> U+2022 BULLET
    "\u2013"  # 0x96 -> U+2013 EN DASH
    "\u2014"  # 0x97 -> U+2014 EM DASH
    "\u06a9"  # 0x98 -> U+06A9 ARABIC LETTER KEHEH
    "\u2122"  # 0x99 -> U+2122 TRADE MARK SIGN
    "\u0691"  # 0x9A -> U+0691 ARABIC LETTER RREH
    "\u203a"  # 0x9B -> U+203A SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    "\u0153"  # 0x9C -> U+0153 LATIN SMALL LIGATURE OE
    "\u200c"  # 0x9D -> U+200C ZERO WIDTH NON-JOINER
    "\u200d"  # 0x9E -> U+200D ZERO WIDTH JOINER
    "\u06ba"  # 0x9F -> U+06BA ARABIC LETTER NOON GHUNNA
    "\xa0"    # 0xA0 -> U+00A0 NO-BREAK SPACE
    "\u060c"  # 0xA1 -> U+060C ARABIC COMMA
    "\xa2"    # 0xA2 -> U+00A2 CENT SIGN
    "\xa3"    # 0xA3 -> U+00A3 POUND SIGN
    "\xa4"    # 0xA4 -> U+00A4 CURRENCY SIGN
    "\xa5"    # 0xA5 -> U+00A5 YEN SIGN
    "\xa6"    # 0xA6 -> U+00A6 BROKEN BAR
    "\xa7"    # 0xA7 -> U+00A7 SECTION SIGN
    "\xa8"    # 0xA8 -> U+00A8 DIAERESIS
    "\xa9"    # 0xA9 -> U+00A9 COPYRIGHT SIGN
    "\u06be"  # 0xAA -> U+06BE ARABIC LETTER HEH DOACHASHMEE
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
    "\u061b"  # 0xBA -> U+061B ARABIC SEMICOLON
    "\xbb"    # 0xBB -> U+00BB RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
    "\xbc"    # 0xBC -> U+00BC VULGAR FRACTION ONE QUARTER
    "\xbd"    # 0xBD -> U+00BD VULGAR FRACTION ONE HALF
    "\xbe"    # 0xBE -> U+00BE VULGAR FRACTION THREE QUARTERS
    "\u061f"  # 0xBF -> U+061F ARABIC QUESTION MARK
    "\u06c1"  # 0xC0 -> U+06C1 ARABIC LETTER HEH GOAL
    "\u0621"  # 0xC1 -> U+0621 ARABIC LETTER HAMZA
    "\u0622"  # 0xC2 -> U+0622 ARABIC LETTER ALEF WITH MADDA ABOVE
    "\u0623"  # 0xC3 -> U+0623 ARABIC LETTER ALEF WITH HAMZA ABOVE
    "\u0624"  # 0xC4 -> U+0624 ARABIC LETTER WAW WITH HAMZA ABOVE
    "\u0625"  # 0xC5 -> U+0625 ARABIC LETTER ALEF WITH HAMZA BELOW
    "\u0626"  # 0xC6 -> U+0626 ARABIC LETTER YEH WITH HAMZA ABOVE
    "\u0627"  # 0xC7 -> U+0627 ARABIC LETTER ALEF
    "\u0628"  # 0xC8 -> U+0628 ARABIC LETTER BEH
    "\u0629"  # 0xC9 -> U+0629 ARABIC LETTER TEH MARBUTA
    "\u062a"  # 0xCA -> U+062A ARABIC LETTER TEH
    "\u062b"  # 0xCB -> U+062B ARABIC LETTER THEH
    "\u062c"  # 0xCC -> U+062C ARABIC LETTER JEEM
    "\u062d"  # 0xCD -> U+062D ARABIC LETTER HAH
    "\u062e"  # 0xCE -> U+062E ARABIC LETTER KHAH
    "\u062f"  # 0xCF -> U+062F ARABIC LETTER DAL
    "\u0630"  # 0xD0 -> U+0630 ARABIC LETTER THAL
    "\u0631"  # 0xD1 -> U+0631 ARABIC LETTER REH
    "\u0632"  # 0xD2 -> U+0632 ARABIC LETTER ZAIN
    "\u0633"  # 0xD3 -> U+0633 ARABIC LETTER SEEN
    "\u0634"  # 0xD4 -> U+0634 ARABIC LETTER SHEEN
    "\u0635"  # 0xD5 -> U+0635 ARABIC LETTER SAD
    "\u0636"  # 0xD6 -> U+0636 ARABIC LETTER DAD
    "\xd7"    # 0xD7 -> U+00D7 MULTIPLICATION SIGN
    "\u0637"  # 0xD8 -> U+0637 ARABIC LETTER TAH
    "\u0638"  # 0xD9 -> U+0638 ARABIC LETTER ZAH
    "\u0639"  # 0xDA -> U+0639 ARABIC LETTER AIN
    "\u063a"  # 0xDB -> U+063A ARABIC LETTER GHAIN
    "\u0640"  # 0xDC -> U+0640 ARABIC TATWEEL
    "\u0641"  # 0xDD -> U+0641 ARABIC LETTER FEH
    "\u0642"  # 0xDE -> U+0642 ARABIC LETTER QAF
    "\u0643"  # 0xDF -> U+0643 ARABIC LETTER KAF
    "\xe0"    # 0xE0 -> U+00E0 LATIN SMALL LETTER A WITH GRAVE
    "\u0644"  # 0xE1 -> U+0644 ARABIC LETTER LAM
    "\xe2"    # 0xE2 -> U+00E2 LATIN SMALL LETTER A WITH CIRCUMFLEX
    "\u0645"  # 0xE3 -> U+0645 ARABIC LETTER MEEM
    "\u0646"  # 0xE4 -> U+0646 ARABIC LETTER NOON
    "\u0647"  # 0xE5 -> U+0647 ARABIC LETTER HEH
    "\u0648"  # 0xE6 -> U+0648 ARABIC LETTER WAW
    "\xe7"    # 0xE7 -> U+00E7 LATIN SMALL LETTER C WITH CEDILLA
    "\xe8"    # 0xE8 -> U+00E8 LATIN SMALL LETTER E WITH GRAVE
    "\xe9"    # 0xE9 -> U+00E9 LATIN SMALL LETTER E WITH ACUTE
    "\xea"    # 0xEA -> U+00EA LATIN SMALL LETTER E WITH CIRCUMFLEX
    "\xeb"    # 0xEB -> U+00EB LATIN SMALL LETTER E WITH DIAERESIS
    "\u0649"  # 0xEC -> U+0649 ARABIC LETTER ALEF MAKSURA
    "\u064a"  # 0xED -> U+064A ARABIC LETTER YEH
    "\xee"    # 0xEE -> U+00EE LATIN SMALL LETTER I WITH CIRCUMFLEX
    "\xef"    # 0xEF -> U+00EF LATIN SMALL LETTER I WITH DIAERESIS
    "\u064b"  # 0xF0 -> U+064B ARABIC FATHATAN
    "\u064c"  # 0xF1 -> U+064C ARABIC DAMMATAN
    "\u064d"  # 0xF2 -> U+064D ARABIC KASRATAN
    "\u064e"  # 0xF3 -> U+064E ARABIC FATHA
    "\xf4"    # 0xF4 -> U+00F4 LATIN SMALL LETTER O WITH CIRCUMFLEX
    "\u064f"  # 0xF5 -> U+064F ARABIC DAMMA
    "\u0650"  # 0xF6 -> U+0650 ARABIC KASRA
    "\xf7"    # 0xF7 -> U+00F7 DIVISION SIGN
    "\u0651"  # 0xF8 -> U+0651 ARABIC SHADDA
    "\xf9"    # 0xF9 -> U+00F9 LATIN SMALL LETTER U WITH GRAVE
    "\u0652"  # 0xFA -> U+0652 ARABIC SUKUN
    "\xfb"    # 0xFB -> U+00FB LATIN SMALL LETTER U WITH CIRCUMFLEX
    "\xfc"    # 0xFC -> U+00FC LATIN SMALL LETTER U WITH DIAERESIS
    "\u200e"  # 0xFD -> U+200E LEFT-TO-RIGHT MARK
    "\u200f"  # 0xFE -> U+200F RIGHT-TO-LEFT MARK
    "\u06d2"  # 0xFF -> U+06D2 ARABIC LETTER YEH BARREE
)
