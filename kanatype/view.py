# kanatype/view.py
"""
画面表示。エンジンの状態を ViewFrame に写して描くだけで、判定には関わらない。
"""
import time
from dataclasses import dataclass

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from kanatype import settings


@dataclass(frozen=True)
class ViewFrame:
    display: str
    typed_kana: str
    untyped_kana: str
    typed_romaji: str
    hint: str


def project(engine, question):
    return ViewFrame(
        display=question.display,
        typed_kana=engine.typed_kana,
        untyped_kana=engine.untyped_kana,
        typed_romaji=engine.typed_display,
        hint=engine.current_hint(),
    )


class View:
    """何も描かない View (テストやAPI用)"""

    def render(self, frame):
        pass

    def miss(self):
        pass

    def draw(self):
        pass

    def show_title(self, start_key):
        pass

    def show_clear(self, start_key):
        pass


def _key_label(key):
    return "Space" if key == " " else escape(key)


class RichView(View):
    def __init__(self, console=None, miss_flash=settings.MISS_FLASH, clock=time.monotonic):
        self.console = console or Console()
        self.miss_flash = miss_flash
        self._clock = clock
        self._error_until = 0.0
        self.frame = None

    @property
    def error(self):
        """ミス表示中かどうか (miss_flash 秒で自動的に消える)"""
        return self._clock() < self._error_until

    def render(self, frame):
        self.frame = frame

    def miss(self):
        self._error_until = self._clock() + self.miss_flash

    def draw(self):
        if self.frame is None:
            return
        frame = self.frame

        kana = Text()
        kana.append(frame.typed_kana, style="bold green")
        kana.append(frame.untyped_kana)

        # 次に打つべきローマ字のヒント表示
        romaji = Text()
        romaji.append(frame.typed_romaji, style="bold")
        romaji.append(frame.hint, style="dim")

        body = Group(Text(frame.display, style="bold"), kana, romaji)
        if self.error:
            self.console.print(Panel(body, border_style="red", style="on dark_red", title="Miss!"))
        else:
            self.console.print(Panel(body, border_style="cyan"))

    def show_title(self, start_key):
        self.console.print(f"[bold]Press {_key_label(start_key)} to Start[/bold]")

    def show_clear(self, start_key):
        self.frame = None
        self.console.print(Panel(Text("Game Clear!", style="bold yellow")))
        self.console.print(f"Press {_key_label(start_key)} to Restart")
