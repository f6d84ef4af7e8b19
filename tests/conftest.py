import os

import pytest

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


@pytest.fixture
def dictionary_file():
    """Path of the reference word list (four letter words, with a few duplicates)"""
    return os.path.join(DATA_DIR, 'words-english.txt')


@pytest.fixture
def word_dictionary(dictionary_file):
    """The reference word list in file order"""
    with open(dictionary_file) as fid:
        return [line.strip() for line in fid if line.strip()]


@pytest.fixture
def small_dictionary():
    """Two shortest ladders from hit to cog"""
    return ['hit', 'hot', 'dot', 'dog', 'lot', 'log', 'cog']
