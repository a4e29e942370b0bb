"""
Shared fixtures for ProofStudio tests.

Provides proof documents wired to a message list, tool state, and a
fully wired main window for widget tests.
"""
import sys
import os
import pytest

# Run Qt headless when no display is available
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Sample layers ───────────────────────────────────────────────────────

SAMPLE_LAYERS = [
    {'uuid': 'bottom', 'kind': 'background', 'name': 'Bottom', 'position': (0, 0), 'size': (100, 100)},
    {'uuid': 'middle', 'kind': 'product', 'name': 'Middle', 'position': (50, 50), 'size': (100, 100)},
    {'uuid': 'top', 'kind': 'design', 'name': 'Top', 'position': (80, 80), 'size': (40, 40)},
]


@pytest.fixture
def messages():
    """List collecting every user notification"""
    return []


@pytest.fixture
def proof(messages):
    """Seeded proof (background-1, product-1, design-1) notifying into `messages`"""
    from models.proof import ProofDocument
    return ProofDocument(notify=messages.append)


@pytest.fixture
def sample_proof(messages):
    """Small three-layer proof with overlapping boxes, nothing selected"""
    from models.proof import ProofDocument
    return ProofDocument(notify=messages.append, layers=SAMPLE_LAYERS, active_layer_uuid=None)


@pytest.fixture
def empty_proof(messages):
    """Proof without layers"""
    from models.proof import ProofDocument
    return ProofDocument(notify=messages.append, layers=[])


@pytest.fixture
def events(proof):
    """List of (event, uuid) pairs received by a proof listener"""
    received = []
    proof.add_listener(lambda event, uuid: received.append((event, uuid)))
    return received


@pytest.fixture
def main_window(qtbot, tmp_path):
    """Fully wired main window using a throwaway config directory"""
    from main import ProofStudio
    window = ProofStudio(config_dir=str(tmp_path / 'config'))
    qtbot.addWidget(window)
    return window
