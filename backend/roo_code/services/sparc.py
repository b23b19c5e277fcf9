"""
SPARC methodology support: phase templates, AI guidance per phase and phase
document review.

Phases are loaded from YAML files in sparc_phases/ (name, description,
next_phase, template) and ordered by following next_phase from the first
phase, "specification".
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from roo_code.services.assistant import TARGET_DOCUMENT, AssistantResult, AssistantService
from roo_code.services.prompts import SPARC_ASSISTANCE_PROMPT, SPARC_REVIEW_PROMPT

FIRST_PHASE = "specification"


class PhaseNotFoundError(Exception):
    """Raised when a SPARC phase key is unknown."""
    pass


@dataclass(frozen=True)
class SparcPhase:
    key: str
    name: str
    description: str
    template: str
    next_phase: Optional[str] = None


@dataclass
class EditorContext:
    """What the editor can tell about the user's current focus."""

    selection: Optional[str] = None
    file_name: Optional[str] = None
    language_id: Optional[str] = None

    def describe(self) -> str:
        if self.selection and self.selection.strip():
            return f"Selected text:\n{self.selection}"
        if self.file_name:
            return f"Current file: {self.file_name}\nLanguage: {self.language_id or 'plaintext'}"
        return "No active document"


def load_phases(phases_dir: Optional[Path] = None) -> Dict[str, SparcPhase]:
    """
    Load phase definitions, ordered from FIRST_PHASE along next_phase links.

    Phases not reachable from FIRST_PHASE are appended in file-name order.
    """
    phases_dir = Path(phases_dir) if phases_dir else Path(__file__).parent / "sparc_phases"

    loaded: Dict[str, SparcPhase] = {}
    for yaml_file in sorted(phases_dir.glob("*.yaml")):
        with open(yaml_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        loaded[yaml_file.stem] = SparcPhase(
            key=yaml_file.stem,
            name=data.get("name", yaml_file.stem.title()),
            description=data.get("description", ""),
            template=data.get("template", ""),
            next_phase=data.get("next_phase"),
        )

    ordered: Dict[str, SparcPhase] = {}
    key = FIRST_PHASE
    while key in loaded and key not in ordered:
        ordered[key] = loaded[key]
        key = loaded[key].next_phase
    for key, phase in loaded.items():
        ordered.setdefault(key, phase)
    return ordered


class SparcMethodology:
    """SPARC assistant: Specification, Pseudocode, Architecture, Refinement, Completion."""

    def __init__(self, assistant: AssistantService, phases: Optional[Dict[str, SparcPhase]] = None):
        self._assistant = assistant
        self._phases = phases if phases is not None else load_phases()

    def list_phases(self) -> List[SparcPhase]:
        return list(self._phases.values())

    def get_phase(self, key: str) -> SparcPhase:
        phase = self._phases.get((key or "").strip().lower())
        if phase is None:
            raise PhaseNotFoundError(
                f"SPARC phase '{key}' not found. Available phases: {', '.join(self._phases)}"
            )
        return phase

    def create_template(self, key: str) -> AssistantResult:
        """The phase's blank markdown template, opened as a new document."""
        phase = self.get_phase(key)
        return AssistantResult(title=f"SPARC {phase.name} Template", content=phase.template)

    async def get_assistance(self, key: str, context: Optional[EditorContext] = None) -> AssistantResult:
        """Ask the assistant for guidance on a phase, given the editor context."""
        phase = self.get_phase(key)
        prompt = SPARC_ASSISTANCE_PROMPT.format(
            phase_name=phase.name,
            phase_description=phase.description,
            context=(context or EditorContext()).describe(),
        )
        return await self._respond(f"SPARC {phase.name} Assistance", prompt)

    async def review_phase(self, key: str, document: str) -> AssistantResult:
        """Review a phase document for completeness, quality and SPARC alignment."""
        phase = self.get_phase(key)
        if not document or not document.strip():
            raise ValueError("Please open a document to review")
        prompt = SPARC_REVIEW_PROMPT.format(phase_name=phase.name, document=document)
        return await self._respond(f"{phase.name} Phase Review", prompt)

    async def _respond(self, title: str, prompt: str) -> AssistantResult:
        # send_chat_message already turns failures into an apology text
        content = await self._assistant.send_chat_message(prompt)
        return AssistantResult(
            title=title,
            content=f"# {title}\n\n{content}",
            target=TARGET_DOCUMENT,
        )
