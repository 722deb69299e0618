"""View state and layout passes for one viewing session.

A layout pass measures every line and paginates the document for the
current view (transposition, font size, viewport). The environment can
change while a pass is pending, e.g. the user loads another song before
the measurements come back. Every pass is therefore keyed by an
:class:`InputSignature`, and results for anything but the latest
signature are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from chord_chart.layout.config import LayoutConfig
from chord_chart.layout.measure import Measurer, measure_lines
from chord_chart.layout.models import PageLayout, SongLine
from chord_chart.layout.paginator import paginate
from chord_chart.pitch_class import tones_to_semitones

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = LayoutConfig()


@dataclass(frozen=True)
class ViewState:
    """User-controlled view parameters.

    Parameters
    ----------
    transposition : float
        Transposition in tone units (0.5 = one semitone).
    font_size : float
        Font size in pixels.
    current_page : int
        Zero-based page shown.
    total_pages : int
        Pages in the current layout, at least 1.
    original_transposition : float
        Transposition suggested by the source, restored by ``reset``.

    Examples
    --------
    >>> view = ViewState().transpose_up().transpose_up()
    >>> view.transposition, view.semitones, view.transposition_label
    (1.0, 2, '+1.0')
    """

    transposition: float = 0.0
    font_size: float = 16
    current_page: int = 0
    total_pages: int = 1
    original_transposition: float = 0.0

    @property
    def semitones(self) -> int:
        """Transposition in semitones."""
        return tones_to_semitones(self.transposition)

    @property
    def transposition_label(self) -> str:
        """Signed display text for the transposition value."""
        if self.transposition == 0:
            return "0"
        if self.transposition > 0:
            return f"+{self.transposition}"
        return f"{self.transposition}"

    @property
    def page_label(self) -> str:
        """Navigation text such as ``"2 / 5"``."""
        return f"{self.current_page + 1} / {self.total_pages}"

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages - 1

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 0

    def transpose_up(self, config: LayoutConfig = DEFAULT_CONFIG) -> ViewState:
        """Raise the transposition by one step, up to the bound."""
        if self.transposition >= config.max_transposition:
            return self
        return replace(self, transposition=round(self.transposition + config.transposition_step, 1))

    def transpose_down(self, config: LayoutConfig = DEFAULT_CONFIG) -> ViewState:
        """Lower the transposition by one step, down to the bound."""
        if self.transposition <= -config.max_transposition:
            return self
        return replace(self, transposition=round(self.transposition - config.transposition_step, 1))

    def reset_transposition(self) -> ViewState:
        """Go back to the transposition suggested by the source."""
        return replace(self, transposition=self.original_transposition)

    def font_larger(self, config: LayoutConfig = DEFAULT_CONFIG) -> ViewState:
        if self.font_size >= config.max_font_size:
            return self
        return replace(self, font_size=self.font_size + config.font_size_step)

    def font_smaller(self, config: LayoutConfig = DEFAULT_CONFIG) -> ViewState:
        if self.font_size <= config.min_font_size:
            return self
        return replace(self, font_size=self.font_size - config.font_size_step)

    def next_page(self) -> ViewState:
        if not self.has_next_page:
            return self
        return replace(self, current_page=self.current_page + 1)

    def previous_page(self) -> ViewState:
        if not self.has_previous_page:
            return self
        return replace(self, current_page=self.current_page - 1)

    def with_total_pages(self, total_pages: int) -> ViewState:
        """Record a new page count, keeping the current page in range."""
        total = max(1, total_pages)
        return replace(self, total_pages=total, current_page=min(self.current_page, total - 1))


def document_fingerprint(lines: Iterable[SongLine]) -> int:
    """Content-based identity of a document.

    Examples
    --------
    >>> from chord_chart.layout.models import EmptyLine, SectionLine
    >>> document_fingerprint([EmptyLine()]) == document_fingerprint([EmptyLine()])
    True
    >>> document_fingerprint([EmptyLine()]) == document_fingerprint([SectionLine("x")])
    False
    """
    return hash(tuple(lines))


@dataclass(frozen=True)
class InputSignature:
    """Everything a layout pass depends on.

    Parameters
    ----------
    document : int
        Fingerprint of the document.
    transposition : float
        Transposition in tone units (changes chord label widths).
    font_size : float
        Font size in pixels.
    width, height : float
        Container size in pixels.
    column_count : int
        Columns per page.
    fonts_ready : bool
        Whether web fonts finished loading (metrics change when they do).
    """

    document: int
    transposition: float
    font_size: float
    width: float
    height: float
    column_count: int
    fonts_ready: bool = True


class LayoutSession:
    """Layout state of one loaded song.

    Parameters
    ----------
    lines : Sequence[SongLine]
        The document; never mutated.
    config : LayoutConfig | None
        Display tuning; defaults to :class:`LayoutConfig`.
    """

    def __init__(self, lines: Sequence[SongLine] = (), config: LayoutConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.lines: tuple[SongLine, ...] = tuple(lines)
        self.layout: PageLayout | None = None
        self._document = document_fingerprint(self.lines)
        self._pending: InputSignature | None = None
        self._committed: InputSignature | None = None

    @property
    def total_pages(self) -> int:
        """Pages of the committed layout, 1 before any layout."""
        return self.layout.total_pages if self.layout else 1

    @property
    def pending(self) -> InputSignature | None:
        return self._pending

    def load(self, lines: Sequence[SongLine]) -> None:
        """Replace the document; any pass in flight becomes stale."""
        self.lines = tuple(lines)
        self._document = document_fingerprint(self.lines)
        self._pending = None
        self._committed = None
        self.layout = None

    def signature(self, view: ViewState, width: float, height: float, fonts_ready: bool = True) -> InputSignature:
        """Build the signature of a pass for the given view and viewport."""
        return InputSignature(
            document=self._document,
            transposition=view.transposition,
            font_size=view.font_size,
            width=width,
            height=height,
            column_count=self.config.column_count(width, height),
            fonts_ready=fonts_ready,
        )

    def needs_layout(self, signature: InputSignature) -> bool:
        """Whether the committed layout was made for other inputs."""
        return self.layout is None or signature != self._committed

    def begin(self, signature: InputSignature) -> InputSignature:
        """Start a pass; earlier pending passes become stale."""
        self._pending = signature
        return signature

    def commit(self, signature: InputSignature, layout: PageLayout) -> bool:
        """Apply the result of a pass if it is still the latest one.

        Returns
        -------
        bool
            True if the layout was applied, False if it was stale.
        """
        if signature != self._pending or signature.document != self._document:
            logger.debug("Discarding stale layout for %s", signature)
            return False
        self.layout = layout
        self._committed = signature
        self._pending = None
        return True

    def compute(
        self,
        signature: InputSignature,
        measurer: Measurer,
        padding_top: float = 0.0,
        padding_bottom: float = 0.0,
    ) -> PageLayout:
        """Measure and paginate the document for a signature.

        This does not touch session state; pass the result to
        :meth:`commit`.
        """
        config = self.config
        columns = signature.column_count
        container_height = config.available_height(
            signature.width,
            signature.height,
            signature.font_size,
            padding_top=padding_top,
            padding_bottom=padding_bottom,
        )
        width = config.measure_width(signature.width, signature.height, columns)
        heights = measure_lines(self.lines, measurer, width, signature.font_size)
        return paginate(self.lines, heights, container_height, columns)

    def relayout(
        self,
        view: ViewState,
        width: float,
        height: float,
        measurer: Measurer,
        fonts_ready: bool = True,
    ) -> PageLayout:
        """Run a full pass synchronously and commit it.

        Skips the work when the committed layout already matches.
        """
        signature = self.signature(view, width, height, fonts_ready=fonts_ready)
        if not self.needs_layout(signature) and self.layout is not None:
            return self.layout
        self.begin(signature)
        layout = self.compute(signature, measurer)
        self.commit(signature, layout)
        return layout
