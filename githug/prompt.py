"""Interactive prompting.

Operations never ask whether the session is interactive themselves; they are
handed a prompter and ask it. ``ConsolePrompter`` talks to a terminal through
rich, ``NonInteractivePrompter`` declines everything, and ``ScriptedPrompter``
replays prepared answers for scripts and tests.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Optional, Protocol, runtime_checkable

from rich.console import Console as RichConsole
from rich.prompt import Confirm, Prompt

from githug.config import GithugConfig, InteractiveMode, get_settings


@runtime_checkable
class Prompter(Protocol):
    """Capability to ask the user questions."""

    interactive: bool

    def confirm(self, question: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...

    def request_text(self, prompt: str) -> Optional[str]:
        """Ask for a line of text; None means the user cancelled."""
        ...


class ConsolePrompter:
    """Prompter backed by rich prompts on a terminal."""

    interactive = True

    def __init__(self, console: Optional[RichConsole] = None):
        self._console = console or RichConsole()

    def confirm(self, question: str, default: bool = False) -> bool:
        try:
            return Confirm.ask(question, default=default, console=self._console)
        except (KeyboardInterrupt, EOFError):
            self._console.print()
            return False

    def request_text(self, prompt: str) -> Optional[str]:
        try:
            return Prompt.ask(prompt, console=self._console)
        except (KeyboardInterrupt, EOFError):
            self._console.print()
            return None


class NonInteractivePrompter:
    """Prompter for scripted use: nobody is there to answer."""

    interactive = False

    def confirm(self, question: str, default: bool = False) -> bool:
        return False

    def request_text(self, prompt: str) -> Optional[str]:
        return None


class ScriptedPrompter:
    """
    Interactive prompter that replays prepared answers.

    Every question asked is recorded in ``asked``. Running out of answers
    behaves like a user who cancels.
    """

    interactive = True

    def __init__(self, confirms: Iterable[bool] = (), texts: Iterable[Optional[str]] = ()):
        self._confirms = deque(confirms)
        self._texts = deque(texts)
        self.asked: list[str] = []

    def confirm(self, question: str, default: bool = False) -> bool:
        self.asked.append(question)
        return self._confirms.popleft() if self._confirms else False

    def request_text(self, prompt: str) -> Optional[str]:
        self.asked.append(prompt)
        return self._texts.popleft() if self._texts else None


def session_is_interactive() -> bool:
    """True when both stdin and stdout are attached to a terminal."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def create_prompter(settings: Optional[GithugConfig] = None) -> Prompter:
    """
    Build the prompter matching the configured interactive mode.

    Args:
        settings: Tool settings; loaded from disk if not given.

    Returns:
        Prompter instance.
    """
    settings = settings or get_settings()

    if settings.interactive == InteractiveMode.ALWAYS:
        return ConsolePrompter()
    if settings.interactive == InteractiveMode.NEVER:
        return NonInteractivePrompter()
    return ConsolePrompter() if session_is_interactive() else NonInteractivePrompter()
