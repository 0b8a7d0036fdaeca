"""Reference renumbering for generated LaTeX.

LLM output tends to label bibliography entries and citations
inconsistently (blank labels, [0], author keys). These passes rewrite
them to sequential integers:

    \\bibitem{7} A. \\bibitem{} B. \\cite{7} \\cite{x} \\cite{7}
    -> \\bibitem{1} A. \\bibitem{2} B. \\cite{1} \\cite{2} \\cite{1}

The two passes number independently. Citation numbers follow the order
in which each distinct label is first cited, not the bibliography order.
"""

import re
from typing import Dict

# \bibitem, not a prefix of a longer control word, with an optional {label}
# (empty or non-numeric labels included)
BIBITEM_PATTERN = re.compile(r"\\bibitem(?![A-Za-z])(?:\{[^}]*\})?")

# \cite{label}, label captured verbatim (comma lists are not split)
CITATION_PATTERN = re.compile(r"\\cite(?![A-Za-z])\s*\{([^}]*)\}")


def renumber_bibitems(text: str) -> str:
    """Relabel every \\bibitem as 1..N in order of appearance.

    Args:
        text: LaTeX source

    Returns:
        Text with bibliography entries numbered sequentially
    """
    count = 0

    def _replace(match: "re.Match[str]") -> str:
        nonlocal count
        count += 1
        return f"\\bibitem{{{count}}}"

    return BIBITEM_PATTERN.sub(_replace, text)


def renumber_citations(text: str) -> str:
    """Relabel every \\cite by order of first appearance of its label.

    Repeated citations of the same label get the same number.

    Args:
        text: LaTeX source

    Returns:
        Text with citation labels replaced by integers
    """
    numbers: Dict[str, int] = {}

    def _replace(match: "re.Match[str]") -> str:
        label = match.group(1)
        if label not in numbers:
            numbers[label] = len(numbers) + 1
        return f"\\cite{{{numbers[label]}}}"

    return CITATION_PATTERN.sub(_replace, text)


def renumber(text: str) -> str:
    """Renumber bibliography entries, then citations.

    Never fails; text without markers is returned unchanged.
    """
    return renumber_citations(renumber_bibitems(text))
