from PySide6.QtCore import QSettings, Signal

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'card_count': 20,
    # Height of a card's title area; collapsed cards show a fraction of it.
    'card_content_height': 250,
    # Fallback heights used by the stack layout when no size is supplied.
    'collapsed_height': 100,
    'expanded_height': 300,
    'transition_duration_ms': 400,
    'flow_logs': False,
}


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('cardstack', 'cardstack')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def get_int_setting(key: str) -> int:
    return settings.value(key, defaultValue=DEFAULT_SETTINGS[key], type=int)
