from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QApplication, QMainWindow

try:
    from models.card_list_model import CardListModel
    from utils.settings import get_int_setting, settings
    from widgets.card_list_view import CardListView
except ModuleNotFoundError:
    from cardstack.models.card_list_model import CardListModel
    from cardstack.utils.settings import get_int_setting, settings
    from cardstack.widgets.card_list_view import CardListView


class MainWindow(QMainWindow):
    def __init__(self, app: QApplication):
        super().__init__()
        self.app = app
        self.setWindowTitle('Card Stack')

        self.card_list_model = CardListModel()
        self.card_list_view = CardListView(self, self.card_list_model)
        self.setCentralWidget(self.card_list_view)
        self.card_list_model.populate(get_int_setting('card_count'))

        # Restore the window geometry.
        if settings.contains('geometry'):
            self.restoreGeometry(settings.value('geometry', type=bytes))
        else:
            self.resize(375, 667)

    def closeEvent(self, event: QCloseEvent):
        """Save the window geometry before closing the window."""
        settings.setValue('geometry', self.saveGeometry())
        super().closeEvent(event)
