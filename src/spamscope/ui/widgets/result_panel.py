# =============================================================================
# Result Panel Widget
# =============================================================================
# Displays the active analysis result:
#   - Verdict banner (spam / legitimate)
#   - Confidence gauge
#   - SPAM/HAM probability bars (spam verdicts only)
#   - Suspicious keywords (spam verdicts only)
#
# Charts are drawn as Rich-markup block bars, colored with the fills the view
# model assigns to each point.
# =============================================================================

from textual.widgets import Static

from spamscope.analysis.view_model import AnalysisView, ChartPoint

BAR_WIDTH = 40

PLACEHOLDER = (
    "[bold]Waiting for analysis[/]\n\n"
    "[dim]Enter an email or load a file to start the analysis[/]"
)


def escape(text: str) -> str:
    """Escape Rich markup in user/classifier content."""
    if not text:
        return ""
    return text.replace("[", "\\[").replace("]", "\\]")


def render_bar(point: ChartPoint, width: int = BAR_WIDTH) -> str:
    """
    Render a percentage as a colored horizontal bar.

    Values outside 0-100 are clamped for drawing only.
    """
    filled = round(max(0.0, min(100.0, point.value)) / 100 * width)
    bar = "█" * filled + "░" * (width - filled)
    return f"{point.name:<5} [{point.fill}]{bar}[/] {point.value:.1f}%"


def render_view(view: AnalysisView) -> str:
    """Build the panel's markup for a view."""
    result = view.result
    if result is None:
        return PLACEHOLDER

    if result.is_spam:
        lines = [
            "[bold #ef4444]⚠ SPAM DETECTED[/]",
            "[dim]This message has been classified as spam[/]",
        ]
    else:
        lines = [
            "[bold #10b981]✔ LEGITIMATE EMAIL[/]",
            "[dim]This message appears to be legitimate[/]",
        ]

    lines.append("")
    lines.append("[bold]Confidence[/]")
    lines.extend(render_bar(point) for point in view.confidence_series)
    lines.append(f"[dim]Analysis time: {result.latency:.2f}ms[/]")

    if view.probability_series:
        lines.append("")
        lines.append("[bold]Probability analysis[/]")
        lines.extend(render_bar(point) for point in view.probability_series)

    if result.is_spam and result.spam_keywords:
        lines.append("")
        lines.append(f"[bold]Suspicious words detected[/] ({len(result.spam_keywords)} words)")
        lines.append("  ".join(f"[#ef4444 on #3f1d1d] {escape(k)} [/]" for k in result.spam_keywords))
        lines.append("[dim]These words contributed to the spam classification[/]")

    return "\n".join(lines)


class ResultPanel(Static):
    """
    A widget for displaying the active analysis result.

    Usage:
        >>> panel = ResultPanel()
        >>> panel.show_view(controller.view())
    """

    DEFAULT_CSS = """
    ResultPanel {
        height: auto;
        padding: 1 2;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(PLACEHOLDER, **kwargs)

    def show_view(self, view: AnalysisView) -> None:
        """Redraw the panel for a view."""
        self.update(render_view(view))
