"""Recurring subject words ("topics") of a Markdown document.

Words are case-folded, must be at least three characters long, must not
be stop words and must occur at least twice. The result is ordered by
count, then alphabetically, and capped at MAX_TOPICS.
"""

import re
from collections import Counter

from .models import Topic

MAX_TOPICS = 20
MIN_WORD_LENGTH = 3
MIN_COUNT = 2

_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]*\)")
_LINK_RE = re.compile(r"\[([^\]]*)\]\([^)]*\)")
_HTML_ENTITY_RE = re.compile(r"&[a-zA-Z]+;")
_INLINE_CODE_RE = re.compile(r"`([^`]*)`")

STOP_WORDS = frozenset({
    # articles
    "the", "a", "an",
    # prepositions
    "in", "on", "at", "to", "for", "with", "from", "by", "of", "about",
    "into", "through", "during", "before", "after", "above", "below",
    "between", "under", "over", "out", "off", "up", "down", "upon",
    "along", "across", "via",
    # pronouns
    "he", "she", "it", "they", "we", "you", "his", "her", "its", "their",
    "our", "your", "him", "them", "who", "whom", "whose", "which", "that",
    "this", "these", "those", "what", "myself", "yourself", "himself",
    "herself", "itself", "ourselves", "themselves",
    # common verbs
    "is", "are", "was", "were", "be", "been", "being", "has", "have",
    "had", "having", "do", "does", "did", "doing", "will", "would",
    "shall", "should", "may", "might", "must", "can", "could", "am",
    "get", "got", "gets", "make", "made", "let", "say", "said", "know",
    "think", "take", "come", "see", "want", "use", "used", "using",
    "find", "give", "tell", "work", "call", "try", "ask", "need", "seem",
    "feel", "leave", "put", "keep", "set", "run", "move", "go", "went",
    "gone", "going",
    # conjunctions
    "and", "but", "or", "nor", "so", "yet", "both", "either", "neither",
    "not", "only", "own", "same",
    # adverbs
    "also", "just", "then", "than", "now", "here", "there", "when",
    "where", "why", "how", "all", "each", "every", "any", "few", "more",
    "most", "other", "some", "such", "no", "very", "too", "quite",
    "enough", "well", "back", "still", "even", "never", "always",
    "often", "ever", "much", "many",
    # everything else
    "like", "one", "two", "new", "old", "first", "last", "long", "great",
    "little", "right", "big", "high", "small", "large", "next", "early",
    "young", "important", "public", "bad", "different", "able", "way",
    "day", "time", "year", "people", "part", "place", "case", "thing",
    "man", "world", "life", "hand", "point", "end", "another", "again",
    "don", "article", "post", "dev", "based",
})


def strip_markdown(markdown: str) -> str:
    """Drop Markdown syntax that would leak URLs or entities into topics."""
    # images before links: ![alt](src) contains [alt](src)
    text = _IMAGE_RE.sub("", markdown)
    text = _LINK_RE.sub(r"\1", text)
    text = _HTML_ENTITY_RE.sub("", text)
    return _INLINE_CODE_RE.sub(r"\1", text)


def tokenize(text: str) -> list[str]:
    """Split text into letter/digit runs, keeping internal hyphens.

    ``pre-push`` stays one token; a trailing hyphen is trimmed.
    """
    words = []
    current = []
    for ch in text:
        if ch.isalpha() or ch.isdigit():
            current.append(ch)
        elif ch == "-" and current:
            current.append(ch)
        elif current:
            word = "".join(current).rstrip("-")
            if word:
                words.append(word)
            current = []
    if current:
        word = "".join(current).rstrip("-")
        if word:
            words.append(word)
    return words


def extract_topics(markdown: str) -> list[Topic]:
    """Rank the recurring content words of a document."""
    if not markdown:
        return []

    freq = Counter()
    for word in tokenize(strip_markdown(markdown)):
        word = word.lower()
        if len(word) < MIN_WORD_LENGTH or word in STOP_WORDS:
            continue
        freq[word] += 1

    ranked = sorted(
        (Topic(word=word, count=count) for word, count in freq.items() if count >= MIN_COUNT),
        key=lambda t: (-t.count, t.word),
    )
    return ranked[:MAX_TOPICS]
