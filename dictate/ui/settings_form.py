"""Settings form state and the settings payload it produces."""

from dataclasses import dataclass, field
from typing import List, Tuple

from ..models.settings import Settings
from .hotkey_recorder import HotkeyRecorder


LANGUAGES: List[Tuple[str, str]] = [
    ("af", "Afrikaans"),
    ("sq", "Albanian"),
    ("ar", "Arabic"),
    ("az", "Azerbaijani"),
    ("eu", "Basque"),
    ("be", "Belarusian"),
    ("bn", "Bengali"),
    ("bs", "Bosnian"),
    ("bg", "Bulgarian"),
    ("ca", "Catalan"),
    ("zh", "Chinese"),
    ("hr", "Croatian"),
    ("cs", "Czech"),
    ("da", "Danish"),
    ("nl", "Dutch"),
    ("en", "English"),
    ("et", "Estonian"),
    ("fi", "Finnish"),
    ("fr", "French"),
    ("gl", "Galician"),
    ("de", "German"),
    ("el", "Greek"),
    ("gu", "Gujarati"),
    ("he", "Hebrew"),
    ("hi", "Hindi"),
    ("hu", "Hungarian"),
    ("id", "Indonesian"),
    ("it", "Italian"),
    ("ja", "Japanese"),
    ("kn", "Kannada"),
    ("kk", "Kazakh"),
    ("ko", "Korean"),
    ("lv", "Latvian"),
    ("lt", "Lithuanian"),
    ("mk", "Macedonian"),
    ("ms", "Malay"),
    ("ml", "Malayalam"),
    ("mr", "Marathi"),
    ("no", "Norwegian"),
    ("fa", "Persian"),
    ("pl", "Polish"),
    ("pt", "Portuguese"),
    ("pa", "Punjabi"),
    ("ro", "Romanian"),
    ("ru", "Russian"),
    ("sr", "Serbian"),
    ("sk", "Slovak"),
    ("sl", "Slovenian"),
    ("es", "Spanish"),
    ("sw", "Swahili"),
    ("sv", "Swedish"),
    ("tl", "Tagalog"),
    ("ta", "Tamil"),
    ("te", "Telugu"),
    ("th", "Thai"),
    ("tr", "Turkish"),
    ("uk", "Ukrainian"),
    ("ur", "Urdu"),
    ("vi", "Vietnamese"),
    ("cy", "Welsh"),
]

LANGUAGE_NAMES = dict(LANGUAGES)


@dataclass
class LanguageSelection:
    """Ordered multi-select over the supported languages."""
    selected: List[str] = field(default_factory=list)

    def toggle(self, code: str) -> None:
        if code in self.selected:
            self.selected = [c for c in self.selected if c != code]
        else:
            self.selected = self.selected + [code]

    def select_all(self) -> None:
        self.selected = [code for code, _ in LANGUAGES]

    def clear(self) -> None:
        self.selected = []

    def filter(self, term: str) -> List[Tuple[str, str]]:
        """Languages whose name contains ``term``, case-insensitively."""
        term = term.lower()
        return [(code, name) for code, name in LANGUAGES if term in name.lower()]

    def names(self) -> List[str]:
        """Display names of the selection; unknown codes are shown as-is."""
        return [LANGUAGE_NAMES.get(code, code) for code in self.selected]


@dataclass
class SettingsForm:
    """Editable settings as presented in the settings screen."""
    api_key: str = ""
    hotkey: str = ""
    hints: LanguageSelection = field(default_factory=LanguageSelection)
    restrictions: LanguageSelection = field(default_factory=LanguageSelection)
    use_restrictions: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "SettingsForm":
        return cls(
            api_key=settings.api_key,
            hotkey=settings.hotkey,
            hints=LanguageSelection(list(settings.language_hints)),
            restrictions=LanguageSelection(list(settings.language_restrictions or [])),
            use_restrictions=settings.language_restrictions is not None
        )

    def apply_chord(self, recorder: HotkeyRecorder) -> None:
        """Take over the chord committed by the hotkey recorder."""
        if recorder.chord:
            self.hotkey = recorder.chord

    def validate(self) -> List[str]:
        """Check the form before saving.

        Returns:
            Human-readable problems, empty if the form can be saved
        """
        problems = []
        if not self.hotkey:
            problems.append("Hotkey must not be empty")
        checked = [("hint", self.hints)]
        if self.use_restrictions:
            checked.append(("restriction", self.restrictions))
        for label, selection in checked:
            unknown = [code for code in selection.selected if code not in LANGUAGE_NAMES]
            if unknown:
                problems.append(f"Unknown language {label}: {', '.join(unknown)}")
        return problems

    def to_settings(self) -> Settings:
        """Compose the settings payload.

        Restrictions are only sent when enabled and non-empty; otherwise
        they are None.
        """
        restrictions = None
        if self.use_restrictions and self.restrictions.selected:
            restrictions = list(self.restrictions.selected)

        return Settings(
            api_key=self.api_key,
            hotkey=self.hotkey,
            language_hints=list(self.hints.selected),
            language_restrictions=restrictions
        )
