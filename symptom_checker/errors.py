"""
Symptom Checker — Винятки

Порушення контракту (помилки програміста або вхідної поверхні) є
винятками. Помилки валідації, які бачить користувач (наприклад, не
обрано жодного симптому), винятками НЕ є — див. Notice у wizard.state.
"""


class SymptomCheckerError(Exception):
    """Базовий виняток пакету"""


class ContractViolation(SymptomCheckerError):
    """Порушення контракту між компонентами"""


class AnswerContractError(ContractViolation, ValueError):
    """Відповідь не відповідає типу або діапазону питання"""


class EmptySelectionError(ContractViolation, ValueError):
    """Генерація питань або оцінка з порожнім набором симптомів"""


class UnknownSymptomError(ContractViolation, KeyError):
    """Симптом з таким id відсутній у каталозі"""

    def __init__(self, symptom_id: str):
        super().__init__(symptom_id)
        self.symptom_id = symptom_id

    def __str__(self) -> str:
        return f"Unknown symptom id: {self.symptom_id!r}"


class InvalidTransitionError(ContractViolation, RuntimeError):
    """Тригер недоступний у поточній фазі майстра"""

    def __init__(self, trigger: str, phase: str):
        super().__init__(f"'{trigger}' is not allowed in phase '{phase}'")
        self.trigger = trigger
        self.phase = phase
