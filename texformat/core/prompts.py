"""Prompt assembly for LaTeX formatting requests."""

from dataclasses import dataclass
from typing import List, Sequence


@dataclass
class FigurePlaceholder:
    """An uploaded figure and the filename the generated LaTeX refers to it by."""

    name: str
    placeholder: str
    index: int


def figure_placeholders(names: Sequence[str]) -> List[FigurePlaceholder]:
    """Assign figure1.png, figure2.png, ... to uploaded figures in order."""
    return [
        FigurePlaceholder(name=name, placeholder=f"figure{i}.png", index=i)
        for i, name in enumerate(names, 1)
    ]


def _figure_list(names: Sequence[str]) -> str:
    if not names:
        return "No figures provided"
    return "\n".join(f"{i}. {name}" for i, name in enumerate(names, 1))


def _placeholder_list(names: Sequence[str]) -> str:
    if not names:
        return "figure1.png, figure2.png, etc."
    return ", ".join(f.placeholder for f in figure_placeholders(names))


FORMAT_PROMPT = """You are an expert in LaTeX formatting for academic papers. I need you to format a research paper according to a given LaTeX template.

**Paper Content (extracted from DOCX):**
{paper_text}

**LaTeX Template:**
{template_text}

**Available Figures:**
{figure_list}

**Instructions:**
1. Carefully analyze the paper content and identify:
   - Title
   - Authors and affiliations
   - Abstract
   - Introduction and all sections
   - Methodology/methods
   - Results
   - Discussion/Conclusion
   - References/Bibliography
   - Figures and their captions

2. Study the LaTeX template structure:
   - Document class and options
   - Required packages
   - Title/author format
   - Section formatting
   - Reference style

3. For Figures:
   - Detect figure references in the paper (e.g., "Figure 1", "Fig. 2")
   - Create proper LaTeX figure environments with appropriate filenames
   - Use placeholder filenames based on the provided figure list: {placeholder_list}
   - Add proper captions and labels
   - Include \\ref{{}} citations in text

4. For References - CRITICAL:
   - Extract ALL bibliography entries from the paper content
   - MUST format as: \\bibitem{{1}} for first reference, \\bibitem{{2}} for second, etc.
   - MUST use \\cite{{1}}, \\cite{{2}}, \\cite{{3}} format in the text when referencing
   - MUST number starting from [1] NOT [0]
   - Create proper \\begin{{thebibliography}}{{99}} environment
   - Every reference must have a number: [1], [2], [3]... NOT blank or [0]
   - Example: \\bibitem{{1}} Author Name. Paper Title. Journal Name, 2020.
   - In text: See reference \\cite{{1}} for details on...

5. Generate complete LaTeX code that:
   - Uses the exact template structure
   - Includes all template packages and settings
   - Formats the paper content according to template guidelines
   - Preserves EVERY SINGLE WORD from the original paper - do NOT skip any paragraphs or sections
   - Include ALL figures with proper captions and citations
   - Include ALL references with proper numbers [1], [2], [3]...
   - Follows proper LaTeX syntax
   - Includes proper escaping of special characters
   - Do NOT omit any content - include introduction, methods, results, discussion, conclusions, and ALL references

6. CRITICAL OUTPUT REQUIREMENTS:
   - Output ONLY the complete LaTeX code
   - Start with \\documentclass
   - End with \\end{{document}}
   - Include EVERY paragraph, section, and subsection from the original paper
   - Include EVERY reference with sequential numbering [1], [2], [3]...
   - Each citation in text MUST be \\cite{{X}} where X is the reference number
   - If original paper mentions "reference [5]", output must use \\cite{{5}} in text and \\bibitem{{5}} in references
   - Do NOT abbreviate, truncate, or skip ANY content
   - NO explanations, NO markdown code blocks
   - ONLY pure LaTeX code with complete content

FINAL INSTRUCTION: Generate the COMPLETE formatted LaTeX document with ALL references numbered and ALL content preserved:"""


def build_format_prompt(
    paper_text: str,
    template_text: str,
    figure_names: Sequence[str] = (),
) -> str:
    """Build the instruction asking the model to typeset a paper.

    Args:
        paper_text: Plain text extracted from the paper
        template_text: LaTeX template source
        figure_names: Original filenames of uploaded figures, in order

    Returns:
        Prompt string for the generation provider
    """
    return FORMAT_PROMPT.format(
        paper_text=paper_text,
        template_text=template_text,
        figure_list=_figure_list(figure_names),
        placeholder_list=_placeholder_list(figure_names),
    )
