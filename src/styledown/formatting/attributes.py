"""Styled-text output: runs of text paired with fixed attribute sets."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional

from reportlab.lib.colors import toColor
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.styles import ParagraphStyle


class LineBreakMode(Enum):
    """How lines are broken when text exceeds the available width."""

    WORD_WRAPPING = "word-wrapping"
    CHAR_WRAPPING = "char-wrapping"
    CLIPPING = "clipping"


class WritingDirection(Enum):
    """Base writing direction of a paragraph."""

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"


@dataclass(frozen=True)
class ParagraphAttributes:
    """Paragraph-level layout attributes.

    Line heights and spacings are in points. A maximum line height of 0
    means the line height is not capped; a hyphenation factor of 0 disables
    hyphenation.
    """

    minimum_line_height: float
    paragraph_spacing: float
    paragraph_spacing_before: float = 0.0
    maximum_line_height: float = 0.0
    line_height_multiple: float = 0.0
    line_spacing: float = 0.0
    first_line_head_indent: float = 0.0
    head_indent: float = 0.0
    tail_indent: float = 0.0
    line_break_mode: LineBreakMode = LineBreakMode.WORD_WRAPPING
    base_writing_direction: WritingDirection = WritingDirection.LEFT_TO_RIGHT
    hyphenation_factor: float = 0.0
    allows_tightening: bool = False
    header_level: Optional[int] = None


@dataclass(frozen=True)
class RunAttributes:
    """Complete attribute set of a styled run.

    Attributes:
        foreground_color: Text fill color as configured
        stroke_color: Text stroke color as configured
        font_family: Font family list as configured
        font_name: Font the family list resolved to
        font_size: Font size in points
        paragraph: Paragraph layout attributes
        kern: Extra character spacing in points
        bold: Bold emphasis flag
        italic: Italic emphasis flag
    """

    foreground_color: str
    stroke_color: str
    font_family: str
    font_name: str
    font_size: float
    paragraph: ParagraphAttributes
    kern: float = 0.0
    bold: bool = False
    italic: bool = False

    @property
    def header_level(self) -> Optional[int]:
        """Get the heading level, or None for non-heading runs."""
        return self.paragraph.header_level

    def to_paragraph_style(self, name: str = "Run") -> ParagraphStyle:
        """Convert to the equivalent reportlab paragraph style."""
        paragraph = self.paragraph
        return ParagraphStyle(
            name,
            fontName=self.font_name,
            fontSize=self.font_size,
            leading=paragraph.minimum_line_height,
            spaceBefore=paragraph.paragraph_spacing_before,
            spaceAfter=paragraph.paragraph_spacing,
            firstLineIndent=paragraph.first_line_head_indent,
            leftIndent=paragraph.head_indent,
            rightIndent=paragraph.tail_indent,
            alignment=TA_LEFT,
            textColor=toColor(self.foreground_color),
            wordWrap=(
                "RTL"
                if paragraph.base_writing_direction is WritingDirection.RIGHT_TO_LEFT
                else None
            ),
            hyphenationLang="" if paragraph.hyphenation_factor == 0 else "en_US",
        )


@dataclass(frozen=True)
class StyledRun:
    """A contiguous piece of text with one attribute set."""

    text: str
    attributes: RunAttributes

    def __str__(self) -> str:
        return self.text


@dataclass
class StyledText:
    """Mutable accumulator of styled runs, in document order.

    Runs are only ever appended; adjacent runs are kept separate even when
    their attributes are equal.
    """

    runs: list[StyledRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Get the concatenated text of all runs."""
        return "".join(run.text for run in self.runs)

    def append(self, run: StyledRun) -> None:
        """Append a run to the end of the buffer."""
        self.runs.append(run)

    def extend(self, runs: Iterable[StyledRun]) -> None:
        """Append several runs, keeping their order."""
        self.runs.extend(runs)

    def __iter__(self) -> Iterator[StyledRun]:
        return iter(self.runs)

    def __len__(self) -> int:
        return len(self.runs)

    def __getitem__(self, index: int) -> StyledRun:
        return self.runs[index]

    def __str__(self) -> str:
        return self.text
