"""Current-artifacts holder shared by the selection and message handlers."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from entitysight.engine.config import ReportConfig
from entitysight.models.artifacts import Artifacts, CopyMessage
from entitysight.models.scene import SceneNode
from entitysight.report.assembler import assemble_report, empty_selection_artifacts

logger = logging.getLogger(__name__)


class ArtifactStore:
    """Holds the artifacts of the latest completed run.

    A run builds a new Artifacts object and swaps it in whole, so readers
    always see a consistent set.
    """

    def __init__(self, config: ReportConfig | None = None) -> None:
        self.config = config or ReportConfig()
        self._lock = threading.Lock()
        self._current = empty_selection_artifacts()
        self._runs = 0

    @property
    def current(self) -> Artifacts:
        with self._lock:
            return self._current

    @property
    def runs(self) -> int:
        return self._runs

    def refresh(self, selection: Sequence[SceneNode]) -> Artifacts:
        """Reprocess the selection and publish the result."""
        artifacts = assemble_report(selection, self.config)
        with self._lock:
            self._current = artifacts
            self._runs += 1
        return artifacts

    def handle_message(self, command: str) -> CopyMessage | None:
        """Answer a copy command from the UI with the matching artifact text."""
        text = self.current.text_for(command)
        if text is None:
            logger.debug("Ignoring UI message %r", command)
            return None
        return CopyMessage(text=text)
