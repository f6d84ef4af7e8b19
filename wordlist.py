# -*- coding: utf-8 -*-
"""
Reading word lists and writing results
"""

import logging
from functools import lru_cache

import patterns
from validator import DEFAULT_WORD_LENGTH, is_word

# The minimum score in the word list
MIN_SCORE = 0

# Default word list
WORD_LIST = 'words-english.txt'

@lru_cache(maxsize=32)
def load_words(wordlist_file=WORD_LIST, word_length=DEFAULT_WORD_LENGTH, pattern=None, min_score=MIN_SCORE):
    """
    Read a word list, one entry per line, either `word` or `word;score`.
    Keep the words of `word_length` letters that score at least `min_score`
    and match `pattern` (if given), lowercased and sorted.
    The result is cached, so it comes back as a tuple.
    """
    parsed = patterns.parse_pattern(pattern) if pattern else None
    words = []
    line_count = 0
    with open(wordlist_file, 'r') as fid:
        for line in fid:
            line_count += 1
            word, _, score = line.strip().partition(';')
            word = word.strip()
            if not is_word(word, word_length):
                continue
            # Scores are optional
            if score.strip() and int(score) < min_score:
                continue
            # Normalize to all lowercase words
            word = word.lower()
            if parsed is not None and not patterns.match_pattern(word, parsed):
                continue
            words.append(word)
    logging.info(f'{line_count} words/lines were found in the raw word list {wordlist_file}')
    logging.debug(f'{len(words)} words were kept from {wordlist_file}')
    return tuple(sorted(words))

def append_lines(file_name, lines):
    """Append each of `lines` to `file_name`, one per line"""
    with open(file_name, 'a') as fid:
        for line in lines:
            fid.write(f'{line}\n')
