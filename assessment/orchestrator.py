# assessment/orchestrator.py
import logging
from dataclasses import replace

from assessment.bank import QUESTION_BANK
from assessment.errors import (
    AssessmentIncompleteError,
    QuestionMismatchError,
    SectionCompleteError,
    SectionMismatchError,
)
from assessment.models import AssessmentState, Section, WiscarProfile
from assessment.results import synthesize
from assessment.sequencer import SectionSequencer

logger = logging.getLogger(__name__)

PROGRESS_STEPPED = "stepped"
PROGRESS_PROPORTIONAL = "proportional"
PROGRESS_MODES = (PROGRESS_STEPPED, PROGRESS_PROPORTIONAL)

# Progress shown while each section is active; WISCAR adds its own sub-progress on top.
STEPPED_PROGRESS = {
    Section.INTRO: 0,
    Section.PSYCHOLOGICAL: 20,
    Section.TECHNICAL: 40,
    Section.WISCAR: 60,
    Section.RESULTS: 100,
}
WISCAR_SUB_PROGRESS = 20

ANSWERED_SECTIONS = (Section.PSYCHOLOGICAL, Section.TECHNICAL, Section.WISCAR)


def _as_section(section):
    if isinstance(section, Section):
        return section
    return Section.from_slug(section)


class AssessmentOrchestrator:
    """
    Drives the linear Intro -> Psychological -> Technical -> WISCAR -> Results flow.

    Owns the AssessmentState; it changes only when start() runs or a section
    completes. Completed sections are frozen, there is no way back.
    """

    def __init__(self, question_bank=None, on_section_complete=None, progress_mode=PROGRESS_STEPPED):
        if progress_mode not in PROGRESS_MODES:
            raise ValueError(f"Unknown progress mode: {progress_mode!r}")
        self.question_bank = question_bank or QUESTION_BANK
        self.on_section_complete = on_section_complete
        self.progress_mode = progress_mode
        self._state = AssessmentState()
        self._sequencers = {
            section: SectionSequencer(section.slug, self.question_bank[section])
            for section in ANSWERED_SECTIONS
        }
        self._restoring = False

    # --- Read-only views ---------------------------------------------------------
    @property
    def state(self):
        return replace(self._state)

    @property
    def section(self):
        return self._state.section

    @property
    def progress(self):
        return self._state.progress

    @property
    def is_complete(self):
        return self._state.section is Section.RESULTS

    @property
    def current_sequencer(self):
        return self._sequencers.get(self._state.section)

    @property
    def current_question(self):
        sequencer = self.current_sequencer
        return sequencer.current_question if sequencer else None

    def section_statuses(self):
        """Navigation tab status per section: active, completed or disabled."""
        statuses = []
        for section in Section:
            if section == self._state.section:
                status = "active"
            elif section < self._state.section:
                status = "completed"
            else:
                status = "disabled"
            statuses.append((section, status))
        return statuses

    def current_scores(self):
        """Scores of the sections completed so far; None for the rest."""
        completed = self._state.section
        return {
            'psychological': self._state.psychological if completed > Section.PSYCHOLOGICAL else None,
            'technical': self._state.technical if completed > Section.TECHNICAL else None,
            'wiscar': self._state.wiscar.as_dict() if self._state.wiscar else None,
        }

    # --- Transitions -------------------------------------------------------------
    def start(self):
        if self._state.section is not Section.INTRO:
            raise SectionCompleteError(Section.INTRO.slug)
        self._state.section = Section.PSYCHOLOGICAL
        self._refresh_progress()
        logger.info("Assessment started")

    def select_answer(self, section, question_id, value):
        """Hold a selection for the current question without committing it."""
        sequencer = self._question_sequencer(section, question_id)
        sequencer.select(value)

    def submit_answer(self, section, question_id, value=None):
        """
        Commit an answer for the current question of the active section.
        With value=None the pending selection is committed. Returns True when the
        section completed.
        """
        sequencer = self._question_sequencer(section, question_id)
        if value is not None:
            sequencer.select(value)
        completed = sequencer.advance()
        if completed:
            self._complete_section(self._state.section, sequencer.scores)
        self._refresh_progress()
        return completed

    def get_results(self):
        if not self.is_complete:
            raise AssessmentIncompleteError(self._state.section.slug)
        return synthesize(self._state.psychological, self._state.technical, self._state.wiscar)

    # --- Internals ---------------------------------------------------------------
    def _question_sequencer(self, section, question_id):
        section = _as_section(section)
        sequencer = self._sequencers.get(section)
        if section is not self._state.section or sequencer is None:
            raise SectionMismatchError(self._state.section.slug, section.slug)

        expected = sequencer.current_question.number
        if question_id != expected:
            raise QuestionMismatchError(expected, question_id)
        return sequencer

    def _complete_section(self, section, scores):
        if section is Section.PSYCHOLOGICAL:
            self._state.psychological = scores[section.slug]
            payload = {'category': section.slug, 'score': self._state.psychological}
        elif section is Section.TECHNICAL:
            self._state.technical = scores[section.slug]
            payload = {'category': section.slug, 'score': self._state.technical}
        else:
            self._state.wiscar = WiscarProfile.from_scores(scores)
            payload = {'wiscar': self._state.wiscar}

        self._state.section = Section(section + 1)
        log = logger.debug if self._restoring else logger.info
        log(f"Completed '{section.slug}', moving to '{self._state.section.slug}': {scores}")

        if self.on_section_complete:
            self.on_section_complete(payload)

    def _refresh_progress(self):
        section = self._state.section
        if section in (Section.INTRO, Section.RESULTS):
            self._state.progress = STEPPED_PROGRESS[section]
            return

        if self.progress_mode == PROGRESS_PROPORTIONAL:
            answered = sum(s.progress[0] for s in self._sequencers.values())
            total = sum(s.progress[1] for s in self._sequencers.values())
            self._state.progress = 20 + 80 * answered // total
            return

        progress = STEPPED_PROGRESS[section]
        if section is Section.WISCAR:
            answered, total = self._sequencers[section].progress
            progress += WISCAR_SUB_PROGRESS * answered // total
        self._state.progress = progress

    # --- Session snapshot --------------------------------------------------------
    def to_dict(self):
        sequencer = self.current_sequencer
        return {
            'section': self._state.section.slug,
            'answers': {s.slug: list(self._sequencers[s].answers) for s in ANSWERED_SECTIONS},
            'pending': sequencer.pending if sequencer else None,
        }

    @classmethod
    def from_dict(cls, data, on_section_complete=None, **kwargs):
        """Rebuild an orchestrator by replaying the committed answers of a snapshot."""
        orchestrator = cls(**kwargs)
        orchestrator._restoring = True
        try:
            target = Section.from_slug(data['section'])
            if target is not Section.INTRO:
                orchestrator.start()
            for section in ANSWERED_SECTIONS:
                for value in data.get('answers', {}).get(section.slug, []):
                    if orchestrator.current_question is None:
                        raise ValueError("Snapshot holds more answers than questions")
                    orchestrator.submit_answer(section, orchestrator.current_question.number, value)

            if orchestrator.section is not target:
                raise ValueError(f"Snapshot answers end in '{orchestrator.section.slug}', "
                                 f"not '{target.slug}'")

            pending = data.get('pending')
            if pending is not None and orchestrator.current_question is not None:
                orchestrator.select_answer(target, orchestrator.current_question.number, pending)
        finally:
            orchestrator._restoring = False

        orchestrator.on_section_complete = on_section_complete
        logger.debug(f"Restored assessment at '{orchestrator.section.slug}' "
                     f"({orchestrator.progress}% complete)")
        return orchestrator
