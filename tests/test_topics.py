"""Tests for topic extraction."""

from ssg.models import Topic
from ssg.topics import MAX_TOPICS, extract_topics, strip_markdown, tokenize


def as_dict(topics):
    return {t.word: t.count for t in topics}


class TestExtractTopics:
    def test_basic_frequency(self):
        md = "Claude is great. Claude helps with coding. Anthropic built Claude."
        assert as_dict(extract_topics(md))["claude"] == 3

    def test_case_insensitive(self):
        assert extract_topics("LLM and llm and Llm are all the same.") == [Topic("llm", 3)]

    def test_empty_input(self):
        assert extract_topics("") == []

    def test_whitespace_input(self):
        assert extract_topics("   \n\t ") == []

    def test_only_stop_words(self):
        assert extract_topics("the and or is it was the and or is it was") == []

    def test_stop_words_filtered(self):
        topics = as_dict(extract_topics("the the the and and and or or or docker docker docker"))
        assert topics == {"docker": 3}

    def test_short_words_excluded(self):
        assert extract_topics("ab ab ab xy xy") == []

    def test_three_char_word_included(self):
        assert extract_topics("api api") == [Topic("api", 2)]

    def test_min_frequency(self):
        assert as_dict(extract_topics("docker docker kubernetes")) == {"docker": 2}

    def test_equal_counts_sort_alphabetically(self):
        md = "claude claude claude agent agent agent docker docker docker"
        assert extract_topics(md) == [Topic("agent", 3), Topic("claude", 3), Topic("docker", 3)]

    def test_sort_frequency_descending(self):
        md = "agent " * 10 + "claude " * 5 + "docker " * 3
        assert [t.word for t in extract_topics(md)] == ["agent", "claude", "docker"]

    def test_alphabetical_tiebreaker(self):
        assert [t.word for t in extract_topics("zebra zebra alpha alpha")] == ["alpha", "zebra"]

    def test_ordering_invariant(self):
        md = "delta " * 4 + "bravo " * 2 + "alpha " * 4 + "charlie " * 2 + "echo " * 3
        topics = extract_topics(md)
        for earlier, later in zip(topics, topics[1:]):
            assert earlier.count >= later.count
            if earlier.count == later.count:
                assert earlier.word <= later.word

    def test_capped_at_twenty(self):
        # Cap is 20, not 18.
        assert MAX_TOPICS == 20
        words = [
            "alpha", "bravo", "charlie", "delta", "echo",
            "foxtrot", "golf", "hotel", "india", "juliet",
            "kilo", "lima", "mike", "november", "oscar",
            "papa", "quebec", "romeo", "sierra", "tango",
            "uniform", "victor", "whiskey", "xray", "yankee",
        ]
        topics = extract_topics(" ".join(w for w in words for _ in range(3)))
        assert len(topics) == 20
        assert [t.word for t in topics] == sorted(words)[:20]

    def test_link_text_kept_url_discarded(self):
        md = "[Claude](https://anthropic.com) and [Claude](https://anthropic.com) again"
        topics = as_dict(extract_topics(md))
        assert topics == {"claude": 2}

    def test_image_refs_stripped(self):
        md = "![screenshot](assets/screenshot.png) ![screenshot](assets/screenshot.png)"
        assert extract_topics(md) == []

    def test_html_entities_stripped(self):
        assert as_dict(extract_topics("&amp; &amp; &quot; &quot; rust rust")) == {"rust": 2}

    def test_inline_code_content_kept(self):
        assert as_dict(extract_topics("`kubectl` and `kubectl` again")) == {"kubectl": 2}

    def test_hyphenated_words(self):
        assert as_dict(extract_topics("pre-push pre-push hooks")) == {"pre-push": 2}


class TestTokenize:
    def test_splits_on_punctuation(self):
        assert tokenize("Hello, world! (again)") == ["Hello", "world", "again"]

    def test_trailing_hyphen_trimmed(self):
        assert tokenize("rust- and go--") == ["rust", "and", "go"]

    def test_leading_hyphen_dropped(self):
        assert tokenize("-flag") == ["flag"]

    def test_unicode_letters(self):
        assert tokenize("café naïve") == ["café", "naïve"]


class TestStripMarkdown:
    def test_link_becomes_text(self):
        assert strip_markdown("see [the docs](https://x.io/docs)") == "see the docs"

    def test_image_removed_before_link(self):
        assert strip_markdown("![alt text](a.png)") == ""
