from lark import Lark, Transformer
from functools import lru_cache
import re

# --- Grammar Definition ---
# Patterns narrow down the dictionary before a search:
# - Lowercase letters (a-z) are literals
# - "." is a wildcard for any single letter
# - [abc] matches one of the listed letters
# - "*" matches any run of letters (possibly empty)
# - "@" matches any vowel (including Y)
# - "#" matches any consonant (excluding Y)
grammar = r"""
    start: expr+ -> start

    ?expr: charset
         | star
         | vowel
         | consonant
         | literal
         | dot

    charset: "[" /[a-z]+/ "]" -> charset
    star: "*"                 -> star
    vowel: "@"                -> vowel
    consonant: "#"            -> consonant
    literal: LITERAL+         -> literal
    dot: "." -> dot

    LITERAL: /[a-z]/

    %import common.WS_INLINE
    %ignore WS_INLINE
"""

# --- Transformer ---
class PatternTransformer(Transformer):
    def start(self, parts):
        return parts

    def literal(self, chars):
        return ('lit', ''.join(str(c) for c in chars))

    def dot(self, children):
        return ('dot',)

    def charset(self, token):
        return ('set', ''.join(sorted(set(str(token[0])))))

    def star(self, children):
        return ('star',)

    def vowel(self, children):
        return ('vowel',)

    def consonant(self, children):
        return ('cons',)

class Pattern:
    def __init__(self, text, parts):
        self.text = text
        self.parts = tuple(parts)

    def __repr__(self):
        return f"Pattern({self.text})"

    def fixed_length(self):
        """The number of letters a word needs to match, or None if the pattern has a star"""
        length = 0
        for part in self.parts:
            if part[0] == 'star':
                return None
            elif part[0] == 'lit':
                length += len(part[1])
            else:
                length += 1
        return length

# Set up the parser
PARSER = Lark(grammar, parser="lalr", transformer=PatternTransformer())

@lru_cache(maxsize=256)
def pattern_to_regex(pattern_parts):
    """
    Convert a pattern to a regex for quick matching
    """

    def _convert(node):
        tag = node[0]

        if tag == 'set':
            return f'[{re.escape(node[1])}]'

        elif tag == 'star':
            return '[a-z]*'

        elif tag == 'vowel':
            return '[aeiouy]'

        elif tag == 'cons':
            return '[b-df-hj-np-tv-xz]'

        elif tag == 'lit':
            return re.escape(node[1])

        elif tag == 'dot':
            return '[a-z]'

        else:
            raise ValueError(f"Unknown pattern type: {tag}")

    return re.compile(''.join(_convert(node) for node in pattern_parts))

@lru_cache(maxsize=256)
def parse_pattern(text):
    parts = PARSER.parse(text)
    return Pattern(text, parts)

def match_pattern(word, pattern):
    """
    Check if a (lowercase) word matches a pattern
    """
    if isinstance(pattern, str):
        pattern = parse_pattern(pattern)
    regex = pattern_to_regex(pattern.parts)
    return regex.fullmatch(word) is not None
