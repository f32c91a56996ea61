"""Category-pattern classifier.

Each selected file becomes one row ``[path, name, text, ruby, category]``:

- ``path``: the root-relative path joined with ``/``
- ``name``: the NFKC-normalized file name without its extension
- ``text``: ``name`` with the prefix and suffix shared by all names removed, where any
  run of digits matches any other run of digits (so ``lesson01_intro`` and
  ``lesson02_outro`` share the prefix ``lesson\\d+_``)
- ``ruby``: the katakana reading of ``name`` from Janome's morphological analyzer; tokens
  without a dictionary reading keep their own spelling
- ``category``: the pattern with every ``${DIR}`` replaced by the file's directory

Rows are ordered by directory, then name, both in natural order.
"""

import os
import re
import unicodedata
from pathlib import PurePosixPath
from typing import Any, List, Optional, Pattern, Sequence, Tuple

from janome.tokenizer import Tokenizer

from dir2csv.classifiers.base_classifier import PathClassifier
from dir2csv.exceptions import ClassificationError
from dir2csv.natural_order import natural_key
from dir2csv.types import Row, SegmentPath

DIR_PLACEHOLDER = "${DIR}"

_NUMBER = re.compile(r"\d+")
# Stands in for a digit run while computing the shared prefix and suffix
_NUMBER_MARK = "\0"
# Janome's reading for tokens the dictionary does not know
_NO_READING = "*"


class CategoryPatternClassifier(PathClassifier):
    """Classifier that labels every file with a category built from its directory.

    Attributes:
        tokenizer: Janome tokenizer used for the ``ruby`` column. Loading the dictionary
            is slow, so the default one is created on first use and then reused.

    Example:
        >>> classifier = CategoryPatternClassifier()
        >>> rows = classifier.classify([("ch1", "lesson10_intro.mp4"), ("ch1", "lesson9_intro.mp4")], "Course_${DIR}")
        >>> [row[0] for row in rows]
        ['ch1/lesson9_intro.mp4', 'ch1/lesson10_intro.mp4']
        >>> rows[0][1], rows[0][2], rows[0][4]
        ('lesson9_intro', '', 'Course_ch1')
    """

    def __init__(self, tokenizer: Optional[Any] = None) -> None:
        self._tokenizer = tokenizer

    @property
    def tokenizer(self) -> Any:
        if self._tokenizer is None:
            self._tokenizer = Tokenizer()
        return self._tokenizer

    def classify(self, paths: Sequence[SegmentPath], pattern: str) -> List[Row]:
        """Build one row per path.

        Raises:
            ClassificationError: If ``paths`` is empty or contains an empty path.
        """
        if not paths:
            raise ClassificationError("No files selected")

        entries: List[Tuple[SegmentPath, str, str]] = []
        for path in paths:
            if not path:
                raise ClassificationError("Cannot classify an empty path")
            *directory, file_name = path
            name = PurePosixPath(unicodedata.normalize("NFKC", file_name)).stem
            entries.append((tuple(directory), name, "/".join(path)))

        entries.sort(key=lambda entry: (tuple(natural_key(part) for part in entry[0]), natural_key(entry[1])))

        prefix, suffix = self._shared_affixes([name for _, name, _ in entries])
        rows = []
        for directory, name, joined in entries:
            text = suffix.sub("", prefix.sub("", name, count=1), count=1)
            category = pattern.replace(DIR_PLACEHOLDER, "/".join(directory))
            rows.append([joined, name, text, self.reading(name), category])
        return rows

    def reading(self, name: str) -> str:
        """Return the reading of ``name``, token by token.

        Example:
            >>> CategoryPatternClassifier().reading("東京")
            'トウキョウ'
        """
        return "".join(
            token.surface if token.reading == _NO_READING else token.reading
            for token in self.tokenizer.tokenize(name)
        )

    @staticmethod
    def _shared_affixes(names: Sequence[str]) -> Tuple[Pattern[str], Pattern[str]]:
        """Return anchored patterns for the prefix and suffix common to all names."""
        masked = [_NUMBER.sub(_NUMBER_MARK, name) for name in names]
        prefix = os.path.commonprefix(masked)
        suffix = os.path.commonprefix([value[::-1] for value in masked])[::-1]
        return (
            re.compile("^" + _affix_expression(prefix)),
            re.compile(_affix_expression(suffix) + "$"),
        )


def _affix_expression(affix: str) -> str:
    return r"\d+".join(re.escape(part) for part in affix.split(_NUMBER_MARK))
