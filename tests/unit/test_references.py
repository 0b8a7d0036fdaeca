"""Unit tests for texformat.core.references module."""

import re

from texformat.core.references import renumber, renumber_bibitems, renumber_citations


def bibitem_labels(text):
    return re.findall(r"\\bibitem\{([^}]*)\}", text)


def cite_labels(text):
    return re.findall(r"\\cite\{([^}]*)\}", text)


class TestRenumberBibitems:
    """Tests for renumber_bibitems function."""

    def test_numbers_in_order(self):
        """Should number entries 1..N in document order."""
        text = "\\bibitem{3} A.\n\\bibitem{1} B.\n\\bibitem{2} C."
        assert renumber_bibitems(text) == "\\bibitem{1} A.\n\\bibitem{2} B.\n\\bibitem{3} C."

    def test_missing_labels(self):
        """Should add labels to bare \\bibitem markers."""
        result = renumber_bibitems("\\bibitem A. \\bibitem B.")
        assert result == "\\bibitem{1} A. \\bibitem{2} B."

    def test_empty_and_non_numeric_labels(self):
        """Should replace empty and author-key labels."""
        result = renumber_bibitems("\\bibitem{} A. \\bibitem{snyder87} B. \\bibitem{0} C.")
        assert bibitem_labels(result) == ["1", "2", "3"]
        assert "snyder87" not in result

    def test_duplicate_labels(self):
        """Should give duplicate labels distinct numbers."""
        result = renumber_bibitems("\\bibitem{1} A. \\bibitem{1} B. \\bibitem{1} C.")
        assert bibitem_labels(result) == ["1", "2", "3"]

    def test_no_markers(self):
        """Should return text without \\bibitem unchanged."""
        text = "No references here \\cite{1}."
        assert renumber_bibitems(text) == text

    def test_ignores_longer_control_words(self):
        """Should not treat \\bibitemsep as a bibliography entry."""
        text = "\\setlength{\\bibitemsep}{0pt}\n\\bibitem{a} A."
        assert renumber_bibitems(text) == "\\setlength{\\bibitemsep}{0pt}\n\\bibitem{1} A."

    def test_leaves_citations_alone(self):
        """Should not touch \\cite markers."""
        assert renumber_bibitems("\\cite{9} \\bibitem{9} X.") == "\\cite{9} \\bibitem{1} X."


class TestRenumberCitations:
    """Tests for renumber_citations function."""

    def test_first_appearance_order(self):
        """Should number distinct labels by first appearance."""
        result = renumber_citations("\\cite{b} \\cite{a} \\cite{c}")
        assert result == "\\cite{1} \\cite{2} \\cite{3}"

    def test_repeated_label_reuses_number(self):
        """Should map repeated labels to the same number."""
        result = renumber_citations("\\cite{7} \\cite{x} \\cite{7} \\cite{x}")
        assert cite_labels(result) == ["1", "2", "1", "2"]

    def test_whitespace_before_brace(self):
        """Should match \\cite followed by whitespace and normalise it."""
        assert renumber_citations("see \\cite  {smith}.") == "see \\cite{1}."

    def test_comma_list_is_one_label(self):
        """Should treat a comma-separated list as a single opaque label."""
        result = renumber_citations("\\cite{a,b} \\cite{a} \\cite{a,b}")
        assert result == "\\cite{1} \\cite{2} \\cite{1}"

    def test_ignores_other_cite_commands(self):
        """Should leave \\citep and \\citet untouched."""
        text = "\\citep{a} \\citet{b}"
        assert renumber_citations(text) == text

    def test_ignores_longer_control_words(self):
        """Should leave \\citeauthor and \\citeyear untouched."""
        text = "\\citeauthor {a} \\citeyear{b} \\cite{c}"
        assert renumber_citations(text) == "\\citeauthor {a} \\citeyear{b} \\cite{1}"

    def test_independent_of_bibliography(self):
        """Should number citations without consulting bibliography labels."""
        text = "\\bibitem{1} A. \\bibitem{2} B. \\cite{2} \\cite{1}"
        assert renumber_citations(text) == "\\bibitem{1} A. \\bibitem{2} B. \\cite{1} \\cite{2}"


class TestRenumber:
    """Tests for renumber function."""

    def test_worked_example(self):
        """Should renumber bibliography then citations."""
        text = "\\bibitem{7} A. \\bibitem{} B. \\cite{7} \\cite{x} \\cite{7}"
        expected = "\\bibitem{1} A. \\bibitem{2} B. \\cite{1} \\cite{2} \\cite{1}"
        assert renumber(text) == expected

    def test_empty_string(self):
        """Should return empty string unchanged."""
        assert renumber("") == ""

    def test_plain_text_unchanged(self):
        """Should return marker-free text unchanged."""
        text = "\\documentclass{article}\n\\begin{document}\nHello {world}.\n\\end{document}"
        assert renumber(text) == text

    def test_idempotent(self):
        """Should leave already sequential output unchanged."""
        once = renumber("\\bibitem{z} A. \\bibitem B. \\cite{q} \\cite{r} \\cite{q}")
        assert renumber(once) == once
        assert bibitem_labels(once) == ["1", "2"]

    def test_nth_bibitem_gets_n(self):
        """Should give the Nth entry label N for any original labels."""
        labels = ["", "x", "5", "5", "Smith2020", "0"]
        text = "\n".join(f"\\bibitem{{{label}}} Entry." for label in labels)
        result = renumber(text)
        assert bibitem_labels(result) == [str(n) for n in range(1, len(labels) + 1)]

    def test_citations_only(self):
        """Should renumber citations and leave other text untouched."""
        text = "Intro \\cite{k1}, body \\cite{k2}; again \\cite{k1}."
        assert renumber(text) == "Intro \\cite{1}, body \\cite{2}; again \\cite{1}."

    def test_markers_inside_other_markup(self):
        """Should match markers inside tables and nested braces."""
        text = (
            "\\begin{tabular}{ll}\n"
            "Mercator & {\\small \\cite{merc}} \\\\\n"
            "UTM & \\textbf{\\cite{utm}} \\\\\n"
            "\\end{tabular}\n"
            "{\\footnotesize \\bibitem{merc} Mercator.}"
        )
        result = renumber(text)
        assert "{\\small \\cite{1}}" in result
        assert "\\textbf{\\cite{2}}" in result
        assert "{\\footnotesize \\bibitem{1} Mercator.}" in result

    def test_unmatched_markers_left_alone(self):
        """Should leave malformed markers untouched."""
        text = "\\cite without braces and \\cite{unclosed"
        assert renumber(text) == text
