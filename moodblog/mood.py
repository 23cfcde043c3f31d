"""
Mood-consistency rules for blog entries.

A blog declares a polarity (positive or negative). An entry posted to that
blog must carry a reaction of the same polarity, and neither its title nor its
content may contain a marker word of the opposite polarity.

Everything in this module is pure: no database access, no request context.
"""
import re
from enum import Enum

from moodblog.errors import InvalidContentError, InvalidEmojiError


class Polarity(Enum):
    POSITIVE = 'positive'
    NEGATIVE = 'negative'

    @property
    def opposite(self):
        return Polarity.NEGATIVE if self is Polarity.POSITIVE else Polarity.POSITIVE


class Reaction(Enum):
    """
    Reaction tag attached to an entry.

    Each member is declared together with its polarity, so a reaction
    without a classification cannot exist.
    """
    LIKE = ('like', Polarity.POSITIVE)
    HAHA = ('haha', Polarity.POSITIVE)
    SAD = ('sad', Polarity.NEGATIVE)
    ANGRY = ('angry', Polarity.NEGATIVE)

    def __init__(self, tag: str, polarity: Polarity):
        self.tag = tag
        self.polarity = polarity


def polarity_of(reaction: Reaction) -> Polarity:
    if not isinstance(reaction, Reaction):
        raise TypeError(f'Expected a Reaction, got {reaction!r}')
    return reaction.polarity


class KeywordPolicy:
    """
    Two fixed sets of marker words used to screen the text of an entry.

    A positive blog rejects text containing a negative marker and a negative
    blog rejects text containing a positive marker. Matching ignores case.
    With `whole_field=True` a field is only rejected when the whole field is
    one of the markers.
    """

    def __init__(self, negative_markers, positive_markers, whole_field: bool = False):
        self.negative_markers = frozenset(word.strip().lower() for word in negative_markers if word.strip())
        self.positive_markers = frozenset(word.strip().lower() for word in positive_markers if word.strip())
        self.whole_field = whole_field
        self._patterns = {
            Polarity.POSITIVE: self._compile(self.negative_markers),
            Polarity.NEGATIVE: self._compile(self.positive_markers),
        }

    @staticmethod
    def _compile(markers):
        if not markers:
            return None
        # Longest first, so 'lonely' wins over a shorter marker it contains
        ordered = sorted(markers, key=lambda word: (-len(word), word))
        return re.compile('|'.join(f'({re.escape(word)})' for word in ordered))

    def markers_against(self, polarity: Polarity) -> frozenset:
        """Return the marker words that disqualify text posted to a blog of `polarity`."""
        if polarity is Polarity.POSITIVE:
            return self.negative_markers
        return self.positive_markers

    def find_marker(self, polarity: Polarity, text: str):
        """Return the first disqualifying marker found in `text`, or None."""
        pattern = self._patterns[polarity]
        if pattern is None or not text:
            return None
        text = text.lower()
        match = pattern.fullmatch(text) if self.whole_field else pattern.search(text)
        return match.group(0) if match else None

    def __repr__(self):
        return (f'<KeywordPolicy: negative={sorted(self.negative_markers)}, '
                f'positive={sorted(self.positive_markers)}, whole_field={self.whole_field}>')


DEFAULT_POLICY = KeywordPolicy(negative_markers=('sad', 'fear', 'lonely'),
                               positive_markers=('love', 'happy', 'trust'))


def validate(blog_polarity: Polarity, reaction: Reaction, title: str, content: str,
             policy: KeywordPolicy = DEFAULT_POLICY) -> None:
    """
    Check an entry against the polarity of its blog.

    Raises `InvalidEmojiError` when the reaction disagrees with the blog, and
    only then screens the title and content, raising `InvalidContentError` on
    the first marker of the opposite polarity. Returns None when the entry is
    consistent.
    """
    if polarity_of(reaction) is not blog_polarity:
        raise InvalidEmojiError()

    for text in (title, content):
        marker = policy.find_marker(blog_polarity, text)
        if marker is not None:
            raise InvalidContentError(marker=marker)
