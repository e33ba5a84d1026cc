"""Command pattern implementation for pager actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .constants import PagerConstants
from .keyboard import KeyEvent, KeyType, MouseEvent
from .model import Intent

if TYPE_CHECKING:
    from .keyboard import InputEvent
    from .pager import Pager


class PagerCommand(ABC):
    """Base class for pager commands."""

    intent: Intent

    @abstractmethod
    def execute(self, pager: 'Pager') -> bool:
        """Execute the command.

        Args:
            pager: Pager instance

        Returns:
            True if the viewport changed
        """
        pass


class NavigationCommand(PagerCommand):
    """Moves the viewport according to a navigation intent."""

    def __init__(self, intent: Intent):
        self.intent = intent

    def execute(self, pager: 'Pager') -> bool:
        return pager.navigate(self.intent)

    def __repr__(self) -> str:
        return f"NavigationCommand({self.intent.name})"


class QuitCommand(PagerCommand):
    intent = Intent.QUIT

    def execute(self, pager: 'Pager') -> bool:
        pager.running = False
        return False


# Keys are (KeyType, value) for keyboard events and (None, button) for mouse
CommandKey = Tuple[Optional[KeyType], str]


class CommandRegistry:
    """Registry for mapping input events to commands."""

    def __init__(self):
        self._commands: Dict[CommandKey, PagerCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Line movement
        self.register((KeyType.SPECIAL, 'down'), NavigationCommand(Intent.SCROLL_DOWN))
        self.register((KeyType.SPECIAL, 'up'), NavigationCommand(Intent.SCROLL_UP))

        # Document movement
        self.register((KeyType.SPECIAL, 'home'), NavigationCommand(Intent.HOME))
        self.register((KeyType.SPECIAL, 'end'), NavigationCommand(Intent.END))

        # Paging
        self.register((KeyType.SPECIAL, 'page_up'), NavigationCommand(Intent.PAGE_UP))
        self.register((KeyType.SPECIAL, 'page_down'), NavigationCommand(Intent.PAGE_DOWN))

        # Mouse wheel
        self.register((None, 'scroll_down'), NavigationCommand(Intent.MOUSE_SCROLL_DOWN))
        self.register((None, 'scroll_up'), NavigationCommand(Intent.MOUSE_SCROLL_UP))

        self.register((KeyType.REGULAR, PagerConstants.QUIT_KEY), QuitCommand())

    def register(self, key: CommandKey, command: PagerCommand):
        """Register a command for a key combination or mouse button."""
        self._commands[key] = command

    def get_command(self, key_type: Optional[KeyType], value: str) -> Optional[PagerCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def command_for(self, event: 'InputEvent') -> Optional[PagerCommand]:
        """Look up the command bound to a key or mouse event."""
        if isinstance(event, KeyEvent):
            return self.get_command(event.key_type, event.value)
        if isinstance(event, MouseEvent):
            return self.get_command(None, event.button)
        return None
