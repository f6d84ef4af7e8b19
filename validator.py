# -*- coding: utf-8 -*-
"""
Checks on the words and file names handed to the word ladder tool
"""

import os

# Default length of the words in a ladder
DEFAULT_WORD_LENGTH = 4

# Characters that can't be used in a result file name on any platform we care about
INVALID_FILENAME_CHARS = set('<>:"/\\|?*\0')


def is_word(value, length=DEFAULT_WORD_LENGTH):
    """Is `value` a sequence of exactly `length` letters?"""
    return len(value) == length and all(c.isalpha() for c in value)


def is_file_name(file_name):
    """
    Does `file_name` look like a valid file name with no directory part?
    """
    if not file_name or os.path.dirname(file_name):
        return False
    if any(c in INVALID_FILENAME_CHARS for c in file_name):
        return False
    return not file_name.startswith(' ') and not file_name.endswith(' ')
