"""
Navigable graphics item.

A labelled circle that can take keyboard focus, be selected and be
moved. Used to populate the demo dialog.
"""

from typing import Optional
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QPen, QBrush, QColor, QFont
from PyQt6.QtWidgets import QGraphicsEllipseItem, QGraphicsItem


# Color scheme
COLORS = {
    "item": QColor("#4A90D9"),          # Blue
    "selected_fill": QColor("#F59E0B"), # Orange
    "focus": QColor("#EF4444"),         # Red
    "label": QColor("white"),
    "grid": QColor("#E5E7EB"),          # Light gray
    "background": QColor("#FAFAFA"),    # Off-white
}


class NavigableItem(QGraphicsEllipseItem):
    """
    Item that takes part in keyboard navigation.

    Draws a dashed red ring while it has focus and turns orange
    while selected. The label is painted, not a child item, so the
    scene holds exactly one item per NavigableItem.
    """

    RADIUS = 20
    FOCUS_MARGIN = 6

    def __init__(self, label: str, parent: Optional[QGraphicsItem] = None):
        super().__init__(
            -self.RADIUS, -self.RADIUS,
            self.RADIUS * 2, self.RADIUS * 2,
            parent
        )
        self._label = label

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsFocusable, True)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable, True)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, True)

        self.setBrush(QBrush(COLORS["item"]))
        self.setPen(QPen(COLORS["item"].darker(120), 2))
        self.setToolTip(label)

    @property
    def label(self) -> str:
        return self._label

    def focusInEvent(self, event):
        super().focusInEvent(event)
        self.update()

    def focusOutEvent(self, event):
        super().focusOutEvent(event)
        self.update()

    def boundingRect(self):
        m = self.FOCUS_MARGIN
        return super().boundingRect().adjusted(-m, -m, m, m)

    def paint(self, painter: QPainter, option, widget=None):
        """Paint with selection fill, label and focus ring."""
        fill = COLORS["selected_fill"] if self.isSelected() else COLORS["item"]
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(QBrush(fill))
        painter.setPen(QPen(fill.darker(120), 2))
        painter.drawEllipse(self.rect())

        font = QFont("SF Pro Display", 9)
        font.setWeight(QFont.Weight.Bold)
        painter.setFont(font)
        painter.setPen(COLORS["label"])
        painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, self._label)

        if self.hasFocus():
            pen = QPen(COLORS["focus"], 3)
            pen.setStyle(Qt.PenStyle.DashLine)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            m = self.FOCUS_MARGIN - 2
            painter.drawEllipse(self.rect().adjusted(-m, -m, m, m))
