import re

# Normalization of german plates:
#
# 1.) upper case: "ka ab123" -> "KA AB123"
# 2.) minus instead of whitespace separator: "KA AB123" -> "KA-AB123"
# 3.) separate identification numbers from letters: "KA-AB123" -> "KA-AB-123"
# 4.) collapse duplicated minus separators: "KA--123" -> "KA-123"
WHITESPACE_PATTERN = re.compile(r'\s+')
LETTER_DIGIT_BOUNDARY_PATTERN = re.compile(r'(?<=[^0-9])(?=[0-9])')
REPEATED_SEPARATOR_PATTERN = re.compile(r'-+')

PLATE_SEPARATOR: str = '-'

GERMAN_LICENSE_PLATE_PATTERN = re.compile(
    r'[A-ZÄÖÜ]{1,3}-[A-Z]{0,2}-?[1-9][0-9]{0,3}')
