"""
Symptom Checker — Майстер оцінювання (Assessment Wizard)

Компоненти:
- AssessmentWizard: кінцевий автомат SYMPTOMS → QUESTIONS → ANALYZING → RESULTS
- WizardPhase / *Phase: тегований стан майстра
- Progress / progress_for: індикатор прогресу
- Navigator / RecordingNavigator: колаборатор навігації

Приклад використання:
    from symptom_checker.wizard import AssessmentWizard, WizardPhase

    wizard = AssessmentWizard()
    wizard.toggle("1")
    result = wizard.start_assessment()

    if not result.accepted:
        show_alert(result.notice.title_key, result.notice.message_key)
"""

from .state import (
    WizardPhase,
    WizardState,
    SymptomsPhase,
    QuestionsPhase,
    AnalyzingPhase,
    ResultsPhase,
    AnalysisTicket,
    Notice,
    NO_SYMPTOMS_NOTICE,
    TransitionResult,
)
from .progress import (
    Progress,
    progress_for,
)
from .navigation import (
    DOCTOR_CALL_ROUTE,
    Navigator,
    NavigationEvent,
    RecordingNavigator,
)
from .wizard import (
    AssessmentWizard,
    TITLE_KEYS,
)


__all__ = [
    # Wizard
    "AssessmentWizard",
    "TITLE_KEYS",

    # State
    "WizardPhase",
    "WizardState",
    "SymptomsPhase",
    "QuestionsPhase",
    "AnalyzingPhase",
    "ResultsPhase",
    "AnalysisTicket",
    "Notice",
    "NO_SYMPTOMS_NOTICE",
    "TransitionResult",

    # Progress
    "Progress",
    "progress_for",

    # Navigation
    "DOCTOR_CALL_ROUTE",
    "Navigator",
    "NavigationEvent",
    "RecordingNavigator",
]
