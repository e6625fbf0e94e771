"""Text analysis tools - counts, statistics, readability, summaries and diffs."""
from typing import Any
import math
import re
import logging

from ...tool_decorator import Tool
from .._helpers import round_half_up
from . import CATEGORY

logger = logging.getLogger(__name__)

_SENTENCE = re.compile(r"[^.!?]+[.!?]+")
_SENTENCE_END = re.compile(r"[.!?]+")
_NON_WORD = re.compile(r"\W+", re.ASCII)
_WHITESPACE = re.compile(r"\s+")

_TEXT_ONLY_SCHEMA = {
    "type": "object",
    "properties": {"text": {"type": "string"}},
    "required": ["text"],
}


def _tokens(text: str) -> list[str]:
    # Splitting "" yields [""], so an empty text still counts as one token
    return _WHITESPACE.split(text.strip())


@Tool(
    "summarize_text",
    CATEGORY,
    "Summarize long text into key points",
    {
        "type": "object",
        "properties": {
            "text": {"type": "string", "description": "Text to summarize"},
            "max_sentences": {"type": "number", "description": "Max sentences in summary", "default": 3},
        },
        "required": ["text"],
    },
)
def summarize_text(text: str, max_sentences: int = 3) -> dict[str, Any]:
    """Extractive summary: keep the sentences richest in frequent long words."""
    sentences = _SENTENCE.findall(text) or [text]
    limit = int(max_sentences)

    word_freq: dict[str, int] = {}
    for word in _NON_WORD.split(text.lower()):
        if len(word) > 4:
            word_freq[word] = word_freq.get(word, 0) + 1

    scored = sorted(
        sentences,
        key=lambda s: sum(word_freq.get(w, 0) for w in _NON_WORD.split(s.lower())),
        reverse=True,
    )
    summary = " ".join(s.strip() for s in scored[:max(limit, 0)])
    return {
        "summary": summary,
        "original_sentences": len(sentences),
        "summary_sentences": min(limit, len(sentences)),
    }


@Tool(
    "word_count",
    CATEGORY,
    "Count words, characters, sentences, and paragraphs in text",
    _TEXT_ONLY_SCHEMA,
)
def word_count(text: str) -> dict[str, Any]:
    tokens = len(_tokens(text))
    return {
        "characters": len(text),
        "characters_no_spaces": len(re.sub(r"\s", "", text)),
        "words": len(text.split()),
        "sentences": len(_SENTENCE_END.findall(text)),
        "paragraphs": len([p for p in re.split(r"\n\s*\n", text) if p]),
        "reading_time_minutes": math.ceil(tokens / 200),
        "speaking_time_minutes": math.ceil(tokens / 130),
    }


@Tool(
    "text_statistics",
    CATEGORY,
    "Advanced text statistics including top words, avg word length, etc.",
    _TEXT_ONLY_SCHEMA,
)
def text_statistics(text: str) -> dict[str, Any]:
    words = re.findall(r"\b[a-z]+\b", text.lower(), re.ASCII)
    freq: dict[str, int] = {}
    for word in words:
        freq[word] = freq.get(word, 0) + 1

    ranked = sorted(freq.items(), key=lambda item: item[1], reverse=True)
    avg_len = sum(len(w) for w in words) / (len(words) or 1)
    return {
        "total_words": len(words),
        "unique_words": len(freq),
        "avg_word_length": round_half_up(avg_len, 1),
        "top_10_words": [{"word": word, "count": count} for word, count in ranked[:10]],
        "longest_word": max(words, key=len) if words else "",
        "lexical_diversity": round_half_up(len(freq) / len(words), 2) if words else None,
    }


@Tool(
    "check_readability",
    CATEGORY,
    "Check text readability score (Flesch-Kincaid)",
    _TEXT_ONLY_SCHEMA,
)
def check_readability(text: str) -> dict[str, Any]:
    sentences = len(_SENTENCE_END.findall(text)) or 1
    words = len(_tokens(text))
    letters = re.sub(r"[^a-z]", "", text.lower())
    syllables = len(re.findall(r"[aeiou]+", letters)) or 1

    words_per_sentence = words / sentences
    syllables_per_word = syllables / words
    fk_score = 206.835 - 1.015 * words_per_sentence - 84.6 * syllables_per_word
    grade = 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59

    if fk_score >= 80:
        level = "Very Easy"
    elif fk_score >= 60:
        level = "Easy"
    elif fk_score >= 50:
        level = "Medium"
    elif fk_score >= 30:
        level = "Hard"
    else:
        level = "Very Hard"

    return {
        "flesch_kincaid_score": round_half_up(fk_score),
        "grade_level": round_half_up(grade),
        "readability_level": level,
        "avg_words_per_sentence": round_half_up(words_per_sentence),
        "avg_syllables_per_word": round_half_up(syllables_per_word, 1),
    }


@Tool(
    "text_diff",
    CATEGORY,
    "Compare two texts and find differences",
    {
        "type": "object",
        "properties": {"text1": {"type": "string"}, "text2": {"type": "string"}},
        "required": ["text1", "text2"],
    },
)
def text_diff(text1: str, text2: str) -> dict[str, Any]:
    """Line-set comparison. Similarity is based on length only."""
    lines1 = text1.split("\n")
    lines2 = text2.split("\n")
    added = [line for line in lines2 if line not in lines1]
    removed = [line for line in lines1 if line not in lines2]

    longest = max(len(text1), len(text2))
    similarity = 1 - abs(len(text1) - len(text2)) / longest if longest else 1
    return {
        "are_identical": text1 == text2,
        "similarity_percent": round_half_up(similarity * 100),
        "lines_added": len(added),
        "lines_removed": len(removed),
        "added_lines": added[:20],
        "removed_lines": removed[:20],
    }
