import pytest

from calculadora_cientifica.config.accessibility import AccessibilityConfig


class FakeVoiceInfo:
    def __init__(self, voice_id, name, languages=()):
        self.id = voice_id
        self.name = name
        self.languages = list(languages)


class FakeEngine:
    """Motor pyttsx3 falso: registra lo que se le pide decir."""

    def __init__(self, voices=None):
        self.properties = {
            'voices': voices if voices is not None else [
                FakeVoiceInfo("english", "English"),
                FakeVoiceInfo("spanish-latin-am", "Spanish", ["es-419"]),
            ],
        }
        self.spoken = []

    def setProperty(self, name, value):
        self.properties[name] = value

    def getProperty(self, name):
        return self.properties.get(name)

    def say(self, text):
        self.spoken.append(text)

    def runAndWait(self):
        pass


class FakeVoice:
    """Sustituto de VoiceFeedback para la aplicación."""

    def __init__(self):
        self.messages = []

    def speak(self, text):
        self.messages.append(text)

    def speak_key(self, label):
        self.messages.append(("key", label))

    def speak_result(self, result):
        self.messages.append(("result", result))


@pytest.fixture
def config():
    return AccessibilityConfig()


@pytest.fixture
def fake_engine():
    return FakeEngine()


@pytest.fixture
def fake_voice():
    return FakeVoice()
