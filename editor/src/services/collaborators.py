"""
Collaborator interfaces for the action dispatcher.

The proof editor does not persist, export or keep history itself. Those
jobs belong to the collaborators below. Any of them may be absent, in which
case the dispatcher only tells the user what would have happened.

- PersistenceService: save and share a proof snapshot
- ExportRenderer: render a snapshot to an output file
- HistoryManager: undo / redo
- ViewportController: zoom and view reset (implemented by the canvas area)
- AssetPicker: ask the user for an image reference (implemented by FileActions)
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from models.transform import ProofGeometry


class PersistenceService(ABC):
    """Stores proof snapshots"""

    @abstractmethod
    def save(self, snapshot: Dict) -> str:
        """Persist a snapshot

        Returns:
            Message describing where it was saved
        """
        pass

    @abstractmethod
    def share(self, snapshot: Dict) -> str:
        """Publish a snapshot

        Returns:
            Share link
        """
        pass


class ExportRenderer(ABC):
    """Renders a proof snapshot to a file"""

    @abstractmethod
    def export(self, snapshot: Dict, geometry: ProofGeometry) -> str:
        """Render the proof

        Returns:
            Path or reference of the rendered output
        """
        pass


class HistoryManager(ABC):
    """Undo/redo of proof edits"""

    @abstractmethod
    def undo(self) -> bool:
        """Returns True if something was undone"""
        pass

    @abstractmethod
    def redo(self) -> bool:
        """Returns True if something was redone"""
        pass


class ViewportController(ABC):
    """Zoom state of the canvas view"""

    @abstractmethod
    def zoom_in(self) -> int:
        """Returns the new zoom percentage"""
        pass

    @abstractmethod
    def zoom_out(self) -> int:
        """Returns the new zoom percentage"""
        pass

    @abstractmethod
    def reset_view(self) -> int:
        """Returns the new zoom percentage"""
        pass


class AssetPicker(ABC):
    """Lets the user choose an image"""

    @abstractmethod
    def pick_image(self) -> Optional[str]:
        """Returns an opaque image reference, or None if cancelled"""
        pass
