#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Command line tool that writes the shortest word ladders between two words.

    word_ladder.py words-english.txt spin spot ResultFile.txt
"""

import argparse
import enum
import itertools
import logging
import os
import sys
import time

from lark.exceptions import LarkError

import patterns
import wordlist
from ladder import get_word_ladders
from validator import DEFAULT_WORD_LENGTH, is_file_name, is_word

## Global variables ##
# The number of ladders to report (None for all of them)
NUM_RESULTS = None


class ValidationStatus(enum.IntEnum):
    """Outcome of validating the inputs, used as the exit code"""
    ALL_OK = 0
    DICTIONARY_FILE_NOT_FOUND = 3
    START_WORD_INVALID = 4
    END_WORD_INVALID = 5
    START_AND_END_WORDS_EQUAL = 6
    RESULT_FILE_INVALID = 7
    DICTIONARY_HAS_NO_VALID_WORDS = 8
    START_WORD_NOT_IN_DICTIONARY = 9
    END_WORD_NOT_IN_DICTIONARY = 10
    PATTERN_INVALID = 11
    NUM_RESULTS_INVALID = 12


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Find the shortest word ladders between two words")
    parser.add_argument('dictionary_file', help="Word list, one word (or word;score) per line")
    parser.add_argument('start_word')
    parser.add_argument('end_word')
    parser.add_argument('result_file', help="File (in the current directory) the ladders are appended to")
    parser.add_argument("-d", "--debug"
                        , help="Turn on debugging"
                        , action="store_true")
    parser.add_argument("-n", "--num_results"
                        , type=int
                        , help="The maximum number of ladders to output"
                        , default=NUM_RESULTS)
    parser.add_argument("-l", "--length"
                        , type=int
                        , help="The length of the words in the ladder"
                        , default=DEFAULT_WORD_LENGTH)
    parser.add_argument("-p", "--pattern"
                        , help="Only use dictionary words matching this pattern, e.g. 's...' or '#@##'")
    parser.add_argument("-m", "--minscore"
                        , type=int
                        , help="The minimum score of a word in a scored word list"
                        , default=wordlist.MIN_SCORE)
    args = parser.parse_args(argv)
    args.start_word = args.start_word.lower()
    args.end_word = args.end_word.lower()
    return args


def validate_arguments(args):
    """Check the command line arguments, logging the first problem found"""
    if not os.path.isfile(args.dictionary_file):
        logging.error(f'The dictionary file ({args.dictionary_file}) must be present and accessible.')
        return ValidationStatus.DICTIONARY_FILE_NOT_FOUND

    if not is_word(args.start_word, args.length):
        logging.error(f'The start word must be specified and be a {args.length} letter word.')
        return ValidationStatus.START_WORD_INVALID

    if not is_word(args.end_word, args.length):
        logging.error(f'The end word must be specified and be a {args.length} letter word.')
        return ValidationStatus.END_WORD_INVALID

    if args.start_word == args.end_word:
        logging.error('The start word and end word must be different words.')
        return ValidationStatus.START_AND_END_WORDS_EQUAL

    if not is_file_name(args.result_file):
        logging.error(f'The result file ({args.result_file}) is not a valid file name.')
        return ValidationStatus.RESULT_FILE_INVALID

    if args.pattern:
        try:
            pattern = patterns.parse_pattern(args.pattern)
        except LarkError as e:
            logging.error(f'The pattern ({args.pattern}) could not be parsed: {e}')
            return ValidationStatus.PATTERN_INVALID
        if pattern.fixed_length() not in (None, args.length):
            logging.error(f'The pattern ({args.pattern}) can never match a {args.length} letter word.')
            return ValidationStatus.PATTERN_INVALID

    if args.num_results is not None and args.num_results < 1:
        logging.error(f'The maximum number of ladders ({args.num_results}) must be at least 1.')
        return ValidationStatus.NUM_RESULTS_INVALID

    return ValidationStatus.ALL_OK


def validate_word_dictionary(words, start_word, end_word):
    """Check the cleansed dictionary holds both words, logging the first problem found"""
    if not words:
        logging.error('The dictionary file does not contain any valid words.')
        return ValidationStatus.DICTIONARY_HAS_NO_VALID_WORDS

    if start_word not in words:
        logging.error(f'The start word ({start_word}) was not found in the dictionary file.')
        return ValidationStatus.START_WORD_NOT_IN_DICTIONARY

    if end_word not in words:
        logging.error(f'The end word ({end_word}) was not found in the dictionary file.')
        return ValidationStatus.END_WORD_NOT_IN_DICTIONARY

    return ValidationStatus.ALL_OK


def write_ladders(result_file, ladders):
    """
    Append each ladder to the result file and print it.
    A header goes in front of each ladder when there is more than one.
    Return the number of ladders written.
    """
    for i, ladder in enumerate(ladders, start=1):
        if len(ladders) > 1:
            wordlist.append_lines(result_file, [f'Ladder {i} Found :'])
        wordlist.append_lines(result_file, ladder)
        logging.debug(f'Ladder {i} Found.')
        print(" • ".join(ladder))
    return len(ladders)


def main(argv=None):
    args = parse_args(argv)

    # Set up logging
    loglevel = 'INFO'
    if args.debug:
        loglevel = 'DEBUG'
    logging.basicConfig(format='%(levelname)s [%(asctime)s] %(message)s', datefmt='%Y-%m-%d %H:%M:%S', level=loglevel)

    status = validate_arguments(args)
    if status != ValidationStatus.ALL_OK:
        return status

    # Set up a timer
    t1 = time.time()
    try:
        words = wordlist.load_words(args.dictionary_file, args.length, args.pattern, args.minscore)
    except (OSError, ValueError) as e:
        logging.error(f'There was an error reading the dictionary file: {e}')
        words = []
    t2 = time.time()
    logging.debug(f'Read the dictionary file: {(t2-t1):.3f} seconds')

    status = validate_word_dictionary(words, args.start_word, args.end_word)
    if status != ValidationStatus.ALL_OK:
        return status

    logging.info(f'{len(words)} valid words were found in the cleansed dictionary file.')
    logging.info(f'Finding ladders from {args.start_word} to {args.end_word}.')

    # Only pull as many ladders as we need
    ladders = get_word_ladders(args.start_word, args.end_word, words)
    ladders = list(itertools.islice(ladders, args.num_results))

    try:
        count = write_ladders(args.result_file, ladders)
    except OSError as e:
        logging.error(f'There was an error writing to the file {args.result_file}: {e}')
        return ValidationStatus.RESULT_FILE_INVALID

    if count:
        logging.info(f'{count} ladder(s) were written to {args.result_file}.')
    else:
        logging.info(f'No ladder was found from {args.start_word} to {args.end_word}.')
    if args.num_results is not None and count >= args.num_results:
        print("Maximum number of outputs reached")
    t3 = time.time()
    print(f"Total time: {t3-t1:.3f} seconds")
    return ValidationStatus.ALL_OK


#%%
if __name__ ==  '__main__':
    sys.exit(main())
