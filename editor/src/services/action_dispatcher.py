"""
Action Dispatcher - routes toolbar/menu commands to collaborators

One entry point, dispatch(action, payload), for the closed set of proof
actions. Each action has exactly one handler. A handler calls its
collaborator when one is configured; otherwise it only notifies the user
with the stub message for that action.

dispatch() never raises: any failure becomes ActionResult(ok=False) and the
failure message goes to the notification sink.

Usage:
    dispatcher = ActionDispatcher(proof, notifier, viewport=canvas_area)
    result = dispatcher.dispatch('zoom-in')
    result = dispatcher.dispatch(ProofAction.UPLOAD, {'asset_ref': 'logo.png'})
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from models.errors import ProofError


class ProofAction(str, Enum):
    """Closed set of user commands"""
    SAVE = 'save'
    DOWNLOAD = 'download'
    SHARE = 'share'
    UPLOAD = 'upload'
    UNDO = 'undo'
    REDO = 'redo'
    ZOOM_IN = 'zoom-in'
    ZOOM_OUT = 'zoom-out'
    RESET = 'reset'

    @classmethod
    def from_id(cls, action_id: Union['ProofAction', str]) -> 'ProofAction':
        """Resolve an action id, accepting 'export' for DOWNLOAD

        Raises:
            ValueError: Unknown action id
        """
        if isinstance(action_id, cls):
            return action_id
        if action_id == 'export':
            return cls.DOWNLOAD
        return cls(action_id)


# Messages shown when no collaborator handles the action
STUB_MESSAGES = {
    ProofAction.SAVE: "Project saved successfully!",
    ProofAction.DOWNLOAD: "Exporting proof...",
    ProofAction.SHARE: "Generating share link...",
    ProofAction.UPLOAD: "Opening file browser...",
    ProofAction.UNDO: "Undoing last action...",
    ProofAction.REDO: "Redoing action...",
    ProofAction.ZOOM_IN: "Zooming in...",
    ProofAction.ZOOM_OUT: "Zooming out...",
    ProofAction.RESET: "Resetting view...",
}


@dataclass
class ActionResult:
    """Outcome of a dispatched action"""
    action: Optional[ProofAction]
    ok: bool
    message: str
    value: Any = None


class ActionDispatcher:
    """Routes ProofAction commands to the configured collaborators"""

    def __init__(self, proof, notify: Optional[Callable[[str], None]] = None,
                 persistence=None, exporter=None, history=None,
                 viewport=None, asset_picker=None):
        """
        Args:
            proof: ProofDocument the actions operate on
            notify: Callback receiving user-visible messages
            persistence: PersistenceService or None
            exporter: ExportRenderer or None
            history: HistoryManager or None
            viewport: ViewportController or None
            asset_picker: AssetPicker or None
        """
        self._logger = logging.getLogger('ActionDispatcher')
        self.proof = proof
        self._notify_callback = notify
        self.persistence = persistence
        self.exporter = exporter
        self.history = history
        self.viewport = viewport
        self.asset_picker = asset_picker

        self._handlers: Dict[ProofAction, Callable] = {
            ProofAction.SAVE: self._save,
            ProofAction.DOWNLOAD: self._download,
            ProofAction.SHARE: self._share,
            ProofAction.UPLOAD: self._upload,
            ProofAction.UNDO: self._undo,
            ProofAction.REDO: self._redo,
            ProofAction.ZOOM_IN: self._zoom_in,
            ProofAction.ZOOM_OUT: self._zoom_out,
            ProofAction.RESET: self._reset_view,
        }
        missing = set(ProofAction) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for actions: {sorted(a.value for a in missing)}")

    def dispatch(self, action: Union[ProofAction, str], payload: Optional[Dict] = None) -> ActionResult:
        """Run an action

        Args:
            action: ProofAction or its string id
            payload: Optional action-specific data

        Returns:
            ActionResult describing completion or failure
        """
        try:
            action = ProofAction.from_id(action)
        except ValueError:
            return self._fail(None, f"Unknown action: {action}")

        self._logger.debug(f"Dispatching {action.value} payload={payload}")
        try:
            result = self._handlers[action](payload or {})
        except ProofError as e:
            return self._fail(action, str(e))
        except Exception as e:
            self._logger.exception(f"Action {action.value} failed")
            return self._fail(action, f"{action.value.capitalize()} failed: {e}")

        if result.message:
            self._notify(result.message)
        return result

    def handler_for(self, action: Union[ProofAction, str]) -> Callable:
        return self._handlers[ProofAction.from_id(action)]

    def _notify(self, message: str):
        if self._notify_callback is not None:
            self._notify_callback(message)

    def _fail(self, action, message) -> ActionResult:
        self._logger.warning(message)
        self._notify(message)
        return ActionResult(action, False, message)

    def _stub(self, action: ProofAction) -> ActionResult:
        return ActionResult(action, True, STUB_MESSAGES[action])

    # ========================================
    # Handlers
    # ========================================

    def _save(self, payload):
        if self.persistence is None:
            return self._stub(ProofAction.SAVE)
        message = self.persistence.save(self.proof.get_snapshot())
        return ActionResult(ProofAction.SAVE, True, message or STUB_MESSAGES[ProofAction.SAVE])

    def _download(self, payload):
        if self.exporter is None:
            return self._stub(ProofAction.DOWNLOAD)
        output = self.exporter.export(self.proof.get_snapshot(), self.proof.geometry)
        return ActionResult(ProofAction.DOWNLOAD, True, f"Exported proof to {output}", output)

    def _share(self, payload):
        if self.persistence is None:
            return self._stub(ProofAction.SHARE)
        link = self.persistence.share(self.proof.get_snapshot())
        return ActionResult(ProofAction.SHARE, True, f"Share link: {link}", link)

    def _upload(self, payload):
        """Attach an image to a layer

        Payload keys (both optional):
            layer_uuid: target layer, defaults to the active layer
            asset_ref: image reference, otherwise the asset picker is asked
        """
        asset_ref = payload.get('asset_ref')
        if asset_ref is None and self.asset_picker is None:
            return self._stub(ProofAction.UPLOAD)

        layer_uuid = payload.get('layer_uuid') or self.proof.active_layer_uuid
        if layer_uuid is None:
            return ActionResult(ProofAction.UPLOAD, False, "Select a layer to upload an image")
        # Fail before opening a dialog for a layer that does not exist
        name = self.proof.get_layer_name(layer_uuid)

        if asset_ref is None:
            asset_ref = self.asset_picker.pick_image()
            if not asset_ref:
                return ActionResult(ProofAction.UPLOAD, False, "Upload cancelled")

        self.proof.set_layer_image(layer_uuid, asset_ref)
        return ActionResult(ProofAction.UPLOAD, True, f"Image added to {name}", asset_ref)

    def _undo(self, payload):
        if self.history is None:
            return self._stub(ProofAction.UNDO)
        if not self.history.undo():
            return ActionResult(ProofAction.UNDO, False, "Nothing to undo")
        return ActionResult(ProofAction.UNDO, True, "Undone")

    def _redo(self, payload):
        if self.history is None:
            return self._stub(ProofAction.REDO)
        if not self.history.redo():
            return ActionResult(ProofAction.REDO, False, "Nothing to redo")
        return ActionResult(ProofAction.REDO, True, "Redone")

    def _zoom_in(self, payload):
        if self.viewport is None:
            return self._stub(ProofAction.ZOOM_IN)
        percent = self.viewport.zoom_in()
        return ActionResult(ProofAction.ZOOM_IN, True, f"Zoom {percent}%", percent)

    def _zoom_out(self, payload):
        if self.viewport is None:
            return self._stub(ProofAction.ZOOM_OUT)
        percent = self.viewport.zoom_out()
        return ActionResult(ProofAction.ZOOM_OUT, True, f"Zoom {percent}%", percent)

    def _reset_view(self, payload):
        if self.viewport is None:
            return self._stub(ProofAction.RESET)
        percent = self.viewport.reset_view()
        return ActionResult(ProofAction.RESET, True, f"View reset to {percent}%", percent)
