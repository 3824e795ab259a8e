"""
Pytest Configuration and Fixtures

Shared fixtures for the classification, norm and report tests.
"""
import os
import tempfile
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep PDFs written by the API tests out of the working tree
os.environ.setdefault("FCE_REPORT_DIR", tempfile.mkdtemp(prefix="fce-reports-"))


@pytest.fixture
def bruce_test() -> dict:
    return {"testName": "Bruce Treadmill Test", "testId": "bruce-treadmill"}


@pytest.fixture
def grip_test() -> dict:
    return {"testName": "Grip Strength", "testId": "grip-strength"}


@pytest.fixture
def shoulder_rom_test() -> dict:
    return {"testName": "Shoulder Flexion/Extension", "testId": "shoulder-rom-flexion-extension"}


@pytest.fixture
def protocol_tests() -> list:
    """A mixed protocol in the order a clinician would run it."""
    return [
        {"testName": "Grip Strength", "testId": "grip-strength"},
        {"testName": "Bruce Treadmill Test", "testId": "bruce-treadmill"},
        {"testName": "Wrist Flexion/Extension", "testId": "wrist-rom-flexion-extension"},
        {"testName": "Shoulder Flexion/Extension", "testId": "shoulder-rom-flexion-extension-left"},
        {"testName": "Reach Overhead", "testId": "reach-overhead"},
        {"testName": "Static Lift - Low", "testId": "static-lift-low"},
        {"testName": "Cervical Spine Rotation", "testId": "cervical-spine-rotation"},
        {"testName": "Bi-Manual Fingering", "testId": "bi-manual-fingering"},
        {"testName": "Ankle Dorsiflexion", "testId": "ankle-rom-dorsi-plantar-flexion"},
        {"testName": "Kasch Step Test", "testId": "kasch-step"},
        {"testName": "Shoulder Flexion", "testId": "shoulder-muscle-flexion"},
    ]


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir
