"""
Chart card widgets: one card per chart group, holding a title and either a
line chart or a short "missing columns" notice.
"""
import numpy as np
import pyqtgraph as pg

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout

from utils.signal_colors import SignalColors

CHART_HEIGHT = 220
LINE_WIDTH = 1.8
X_AXIS_LABEL = "Index (numéro de ligne)"


def missing_columns_text(group):
    """Text shown instead of a chart when no column of the group holds data."""
    return f"• {group.title} : colonne(s) absente(s)"


def series_points(series):
    """
    Converts a series into plot coordinates.

    x is the row index; rows without a value are left out, so the curve joins
    the surrounding points.

    Args:
        series (Series): Series to plot

    Returns:
        tuple[np.ndarray, np.ndarray]: (x, y) arrays of equal length
    """
    indexed = [(idx, value) for idx, value in enumerate(series.values) if value is not None]
    if not indexed:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)
    x, y = zip(*indexed)
    return np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)


def build_plot_widget(group):
    """
    Creates the line chart of a group, one curve per series.

    Args:
        group (ChartGroup): Group with at least one series

    Returns:
        pg.PlotWidget: The configured chart
    """
    plot = pg.PlotWidget()
    plot.setFixedHeight(CHART_HEIGHT)
    plot.setBackground('w')
    plot.showGrid(x=True, y=True, alpha=0.3)
    plot.setLabel('bottom', X_AXIS_LABEL)
    plot.hideAxis('right')
    plot.setMouseEnabled(x=True, y=True)
    plot.addLegend(offset=(10, 10), labelTextSize='8pt')

    for series in group.series:
        x, y = series_points(series)
        pen = pg.mkPen(color=SignalColors.get_color_for_name(series.label), width=LINE_WIDTH)
        plot.plot(x, y, pen=pen, name=series.label)

    return plot


def build_chart_card(group, parent=None):
    """
    Builds the card widget of one chart group.

    Args:
        group (ChartGroup): Group to display
        parent (QWidget, optional): Parent widget

    Returns:
        QFrame: Card with the group title and its chart or notice
    """
    card = QFrame(parent)
    card.setFrameShape(QFrame.StyledPanel)
    card.setObjectName("chartCard")

    layout = QVBoxLayout(card)
    layout.setContentsMargins(12, 12, 12, 12)

    title = QLabel(group.title)
    title.setStyleSheet("font-weight: 500;")
    layout.addWidget(title)

    if not group.has_data:
        layout.addWidget(QLabel(missing_columns_text(group)))
        return card

    layout.addWidget(build_plot_widget(group))
    return card
