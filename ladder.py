# -*- coding: utf-8 -*-
"""
Find every shortest word ladder between two words of a dictionary.

A word ladder is a sequence of dictionary words where each word differs
from the previous one by a single letter, e.g. SPIN -> SPIT -> SPOT.

The search happens in three passes over a graph of the dictionary:

1) Every word becomes a node, and each node gets the list of its
   "relatives" (nodes whose word differs by exactly one letter).

2) A breadth-first search from the start node assigns each node a level
   (its distance from the start) and records, for each node, the
   relatives that sit one level further along a shortest path.  A relative
   is accepted by every parent that reaches it at the same level, so all
   the shortest paths survive, not just the first one found.

3) A depth-first walk over those shortest-path children yields the ladders.
"""

import logging
import math
import time
from collections import deque

# The level of a node that the search has not reached
UNKNOWN_LEVEL = math.inf


def differs_by(first_word, second_word, differences=1):
    """
    Return True if two words of equal length differ in exactly
    `differences` positions
    """
    if len(first_word) != len(second_word):
        raise ValueError(f"Cannot compare words of different lengths: {first_word!r}, {second_word!r}")

    count = 0
    for a, b in zip(first_word, second_word):
        if a != b:
            count += 1
            # no point looking further
            if count > differences:
                break
    return count == differences


class WordNode:
    """A dictionary word and its place in the search"""
    def __init__(self, word):
        self.word = word
        # indexes of nodes one letter away
        self.relatives = []
        # indexes of relatives one step along a shortest path
        self.shortest_path = []
        self.level = UNKNOWN_LEVEL
        self.visited = False

    def __repr__(self):
        return f"WordNode({self.word}, level={self.level})"


class WordGraph:
    """
    The nodes for one query, addressed by their position in `nodes`.
    Build a new graph for every query: the search writes levels into it.
    """
    def __init__(self, words):
        self.nodes = [WordNode(w) for w in words]
        self.build_relatives()

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, ix):
        return self.nodes[ix]

    def build_relatives(self):
        """Compare each node with every node (itself included) and link the relatives"""
        for node in self.nodes:
            node.relatives.extend(
                ix for ix, other in enumerate(self.nodes)
                if differs_by(node.word, other.word)
            )

    def index(self, word):
        """The index of the first node holding `word`, or None"""
        for ix, node in enumerate(self.nodes):
            if node.word == word:
                return ix
        return None

    def visited_count(self):
        return sum(1 for node in self.nodes if node.visited)

    def level(self, start, end):
        """
        Breadth-first search from node `start`, setting levels and shortest
        path children for every node up to the level of node `end`
        """
        end_word = self.nodes[end].word
        end_level = UNKNOWN_LEVEL
        self.nodes[start].level = 0

        queue = deque([start])
        while queue:
            node = self.nodes[queue.popleft()]
            # a node can be queued by several parents
            if node.visited:
                continue
            node.visited = True

            if node.word == end_word:
                end_level = node.level
                continue

            relatives_level = node.level + 1
            if relatives_level > end_level:
                continue

            for ix in node.relatives:
                relative = self.nodes[ix]
                if relatives_level <= relative.level:
                    node.shortest_path.append(ix)
                    relative.level = relatives_level
                    queue.append(ix)

        return end_level

    def ladders(self, start, end, ladder=None):
        """
        Yield every ladder from node `start` to node `end`, following the
        shortest path children recorded by `level`
        """
        if ladder is None:
            ladder = []

        node = self.nodes[start]
        ladder.append(node.word)

        if node.word == self.nodes[end].word:
            yield list(ladder)
        else:
            for child in node.shortest_path:
                yield from self.ladders(child, end, ladder)

        ladder.pop()


def get_word_ladders(start_word, end_word, word_dictionary):
    """
    Return an iterator over all the shortest ladders from `start_word`
    to `end_word` using the words of `word_dictionary`.

    Nothing is raised for bad input: an empty word, an empty dictionary or
    a word missing from the dictionary all give an empty iterator, the same
    as when no ladder exists.
    """
    if not start_word or not end_word or not word_dictionary:
        return iter(())

    if start_word not in word_dictionary or end_word not in word_dictionary:
        return iter(())

    t1 = time.time()
    graph = WordGraph(word_dictionary)
    t2 = time.time()
    logging.debug(f'A graph containing {len(graph)} word nodes was generated in {(t2-t1):.3f} seconds')

    start = graph.index(start_word)
    end = graph.index(end_word)
    logging.debug(f'The start word was found at index {start} in the graph')
    logging.debug(f'The end word was found at index {end} in the graph')

    end_level = graph.level(start, end)
    logging.debug(f'{graph.visited_count()} nodes were included in the breadth-first search')
    if end_level == UNKNOWN_LEVEL:
        logging.debug(f'{end_word} cannot be reached from {start_word}')

    return graph.ladders(start, end)
