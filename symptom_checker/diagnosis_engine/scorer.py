"""
Symptom Checker — Оцінювач діагнозів

DiagnosisScorer перетворює обрані симптоми та відповіді на ранжований
список ймовірних станів.

Алгоритм:
1. Матриця спорідненості A (стани × симптоми каталогу)
2. x — бінарний вектор обраних симптомів
3. coverage = (A @ x) / |x| — частка симптомів, яку пояснює стан
4. p = base * (0.5 + 0.5 * coverage) + модифікатори відповідей
5. clip [0, 100], стабільне сортування за спаданням

Гарантії: результат непорожній, відсортований за спаданням, при рівності —
порядок визначення в таблиці станів.
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from symptom_checker.catalog import SymptomCatalog, default_catalog
from symptom_checker.config import ScorerConfig
from symptom_checker.errors import AnswerContractError
from symptom_checker.schemas import (
    AnswerValue,
    Diagnosis,
    DiagnosisSeverity,
    Question,
    Symptom,
)
from .conditions import CONDITION_PROFILES, ConditionProfile

logger = logging.getLogger(__name__)


LONG_DURATIONS = frozenset({"4_7_days", "more_week"})
EMERGENCY_RECOMMENDATION = "seek_emergency_care"


class DiagnosisScorer:
    """
    Оцінювач ймовірних станів.

    Приклад використання:
        scorer = DiagnosisScorer()

        diagnoses = scorer.score(selected, questions, answers)
        for d in diagnoses:
            print(f"{d.condition_key}: {d.probability}%")
    """

    def __init__(
        self,
        config: Optional[ScorerConfig] = None,
        catalog: Optional[SymptomCatalog] = None,
        profiles: Sequence[ConditionProfile] = CONDITION_PROFILES
    ):
        if not profiles:
            raise ValueError("At least one condition profile is required")

        self.config = config or ScorerConfig()
        self.catalog = catalog or default_catalog
        self.profiles = tuple(profiles)

        # Колонки матриці — name_key симптомів у порядку каталогу
        self.symptom_keys = [s.name_key for s in self.catalog]
        self._column = {key: i for i, key in enumerate(self.symptom_keys)}

        self.affinity_matrix = self._build_matrix()

    def _build_matrix(self) -> np.ndarray:
        """Матриця (N_conditions, N_symptoms)"""
        matrix = np.zeros((len(self.profiles), len(self.symptom_keys)), dtype=np.float64)

        for row, profile in enumerate(self.profiles):
            for key, weight in profile.affinities.items():
                col = self._column.get(key)
                if col is not None:
                    matrix[row, col] = weight

        return matrix

    def _selection_vector(self, selected: Sequence[Symptom]) -> np.ndarray:
        x = np.zeros(len(self.symptom_keys), dtype=np.float64)
        for symptom in selected:
            col = self._column.get(symptom.name_key)
            if col is not None:
                x[col] = 1.0
        return x

    @staticmethod
    def _answers_by_key(
        questions: Sequence[Question],
        answers: Sequence[AnswerValue]
    ) -> Dict[str, AnswerValue]:
        """Відповіді за question_key (вирівняні за індексом)"""
        if len(answers) > len(questions):
            raise AnswerContractError(
                f"{len(answers)} answers for {len(questions)} questions"
            )
        return {q.question_key: a for q, a in zip(questions, answers)}

    def _answer_modifiers(self, answers: Dict[str, AnswerValue]) -> np.ndarray:
        """Зсув ймовірності для кожного стану від відповідей"""
        cfg = self.config
        shift = np.zeros(len(self.profiles), dtype=np.float64)

        long_duration = answers.get("symptom_duration") in LONG_DURATIONS

        pain = answers.get("pain_level")
        high_pain = (
            isinstance(pain, int) and not isinstance(pain, bool)
            and pain >= cfg.high_pain_threshold
        )

        took_medication = answers.get("taken_medication") is True

        for i, profile in enumerate(self.profiles):
            if long_duration:
                if profile.self_limiting:
                    shift[i] -= cfg.long_duration_bonus
                else:
                    shift[i] += cfg.long_duration_bonus

            if high_pain:
                if profile.severity == DiagnosisSeverity.HIGH:
                    shift[i] += cfg.high_pain_bonus
                elif profile.severity == DiagnosisSeverity.MEDIUM:
                    shift[i] += cfg.high_pain_bonus // 2

            if took_medication and profile.self_limiting:
                shift[i] -= cfg.medication_penalty

        return shift

    def probabilities(
        self,
        selected: Sequence[Symptom],
        questions: Sequence[Question] = (),
        answers: Sequence[AnswerValue] = ()
    ) -> np.ndarray:
        """
        Ймовірності для всіх станів таблиці (без фільтрації).

        Returns:
            int-масив довжини N_conditions у [0, 100]
        """
        x = self._selection_vector(selected)
        match = self.affinity_matrix @ x

        n_selected = max(len(selected), 1)
        coverage = match / n_selected

        base = np.array([p.base_probability for p in self.profiles], dtype=np.float64)
        raw = base * (0.5 + 0.5 * coverage)
        raw += self._answer_modifiers(self._answers_by_key(questions, answers))

        return np.clip(np.rint(raw), 0, 100).astype(int)

    def score(
        self,
        selected: Sequence[Symptom],
        questions: Sequence[Question] = (),
        answers: Sequence[AnswerValue] = ()
    ) -> List[Diagnosis]:
        """
        Ранжований список ймовірних станів.

        Args:
            selected: Обрані симптоми
            questions: Згенеровані питання прогону
            answers: Відповіді, вирівняні за індексом з questions

        Returns:
            Непорожній список Diagnosis за спаданням probability
        """
        probs = self.probabilities(selected, questions, answers)

        x = self._selection_vector(selected)
        matched = (self.affinity_matrix @ x) > 0

        candidates = np.flatnonzero(matched)
        if candidates.size == 0:
            # Жоден профіль не збігся — перший стан таблиці
            logger.info("No condition profile matched %d symptoms, using fallback", len(selected))
            candidates = np.array([0])

        # Стабільне сортування: рівні ймовірності — в порядку визначення
        order = candidates[np.argsort(-probs[candidates], kind="stable")]
        order = order[:self.config.max_results]

        diagnoses = [self._to_diagnosis(self.profiles[i], int(probs[i])) for i in order]

        logger.debug(
            "Scored %d symptoms: %s",
            len(selected),
            ", ".join(f"{d.condition_key}={d.probability}" for d in diagnoses)
        )
        return diagnoses

    @staticmethod
    def _to_diagnosis(profile: ConditionProfile, probability: int) -> Diagnosis:
        recommendations = profile.recommendations_keys
        if profile.urgent and EMERGENCY_RECOMMENDATION not in recommendations:
            recommendations = (EMERGENCY_RECOMMENDATION,) + recommendations

        return Diagnosis(
            condition_key=profile.condition_key,
            probability=probability,
            severity=profile.severity,
            description_key=profile.description_key,
            recommendations_keys=recommendations,
        )

    def __repr__(self) -> str:
        return (
            f"DiagnosisScorer(conditions={len(self.profiles)}, "
            f"symptoms={len(self.symptom_keys)}, max_results={self.config.max_results})"
        )
