import sys
from PySide6.QtCore import Qt, QEvent, QTimer
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QApplication, QWidget
from cclock.common.logger import log
from cclock.ui.controller import ClockController
from cclock.ui.painter import QtSurface

_KEY_NAMES = {
    Qt.Key_Space: "space",
    Qt.Key_Left: "left",
    Qt.Key_Right: "right",
    Qt.Key_P: "p",
    Qt.Key_F: "f",
    Qt.Key_R: "r",
    Qt.Key_Escape: "escape",
}


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# The whole app is a single widget: the controller decides what a press means and what to draw, this class only
# forwards Qt events to it and provides the painter.
class ClockWindow(QWidget):

    def __init__(self, initial_times, settings):
        super().__init__()
        self.setWindowTitle("Chess Clock")
        self.setMinimumSize(320, 160)
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self.setFocusPolicy(Qt.StrongFocus)

        self.settings = settings
        self.controller = ClockController(
            initial_times,
            settings=settings,
            on_fullscreen=self._set_fullscreen,
        )

        # -- Frame timer --
        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._timer.timeout.connect(self.update)
        self._timer.start(settings["frame_interval_ms"])

    # ------------------------------------------------------------------ #
    #  Qt events                                                           #
    # ------------------------------------------------------------------ #

    def resizeEvent(self, event):
        size = event.size()
        self.controller.resize(size.width(), size.height())
        super().resizeEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            surface = QtSurface(painter, self.width(), self.height(), self.settings["font"])
            self.controller.frame(surface)
        finally:
            painter.end()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self.controller.press(pos.x(), pos.y())
            self.update()
            event.accept()
            return
        super().mousePressEvent(event)

    def event(self, event):
        # Accepting TouchBegin stops Qt from also synthesizing a mouse press for the same tap.
        if event.type() == QEvent.TouchBegin:
            points = event.points()
            if points:
                pos = points[0].position()
                self.controller.press(pos.x(), pos.y())
                self.update()
            event.accept()
            return True
        return super().event(event)

    def keyPressEvent(self, event):
        name = _KEY_NAMES.get(event.key())
        if name is not None and not event.isAutoRepeat() and self.controller.key_press(name):
            self.update()
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event):
        self._timer.stop()
        log.info("Window closed")
        event.accept()

    # ------------------------------------------------------------------ #
    #  Fullscreen                                                          #
    # ------------------------------------------------------------------ #

    def _set_fullscreen(self, exit_only=False):
        if self.isFullScreen():
            self.showNormal()
        elif not exit_only:
            self.showFullScreen()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(initial_times, settings):
    app = QApplication(sys.argv[:1])
    window = ClockWindow(initial_times, settings)
    window.resize(960, 480)
    if settings["start_fullscreen"]:
        window.showFullScreen()
    else:
        window.show()
    sys.exit(app.exec())
