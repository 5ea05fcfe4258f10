"""
Symptom Checker — Каталог симптомів

Статичний довідник симптомів, які користувач може обрати.
Порядок каталогу стабільний — на нього спираються UI та оцінювач.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from symptom_checker.errors import UnknownSymptomError
from symptom_checker.schemas import Symptom, SymptomSeverity


# Переклад ключа → текст (зовнішній колаборатор)
Translate = Callable[[str], str]


COMMON_SYMPTOMS: Tuple[Symptom, ...] = (
    Symptom(id="1", name_key="fever", severity=SymptomSeverity.MODERATE, category="general", icon="thermometer"),
    Symptom(id="2", name_key="headache", severity=SymptomSeverity.MILD, category="neurological", icon="person"),
    Symptom(id="3", name_key="cough", severity=SymptomSeverity.MILD, category="respiratory", icon="medical"),
    Symptom(id="4", name_key="sore_throat", severity=SymptomSeverity.MILD, category="respiratory", icon="medical"),
    Symptom(id="5", name_key="chest_pain", severity=SymptomSeverity.SEVERE, category="cardiovascular", icon="heart"),
    Symptom(id="6", name_key="nausea", severity=SymptomSeverity.MODERATE, category="digestive", icon="restaurant"),
    Symptom(id="7", name_key="fatigue", severity=SymptomSeverity.MILD, category="general", icon="battery-dead"),
    Symptom(id="8", name_key="dizziness", severity=SymptomSeverity.MODERATE, category="neurological", icon="refresh-circle"),
    Symptom(id="9", name_key="shortness_breath", severity=SymptomSeverity.SEVERE, category="respiratory", icon="fitness"),
    Symptom(id="10", name_key="stomach_pain", severity=SymptomSeverity.MODERATE, category="digestive", icon="restaurant"),
)


def _identity(key: str) -> str:
    return key


class SymptomCatalog:
    """
    Каталог симптомів: id ↔ Symptom

    Приклад використання:
        catalog = SymptomCatalog()

        # Всі симптоми
        for symptom in catalog.list():
            print(symptom.id, symptom.name_key)

        # Пошук за відображуваним текстом
        found = catalog.search("fev", translate=translator.t)
    """

    def __init__(self, symptoms: Optional[Iterable[Symptom]] = None):
        symptoms = COMMON_SYMPTOMS if symptoms is None else tuple(symptoms)

        self._symptoms: Tuple[Symptom, ...] = tuple(symptoms)
        self._by_id: Dict[str, Symptom] = {}
        self._order: Dict[str, int] = {}

        for position, symptom in enumerate(self._symptoms):
            if symptom.id in self._by_id:
                raise ValueError(f"Duplicate symptom id: {symptom.id}")
            self._by_id[symptom.id] = symptom
            self._order[symptom.id] = position

    def list(self) -> List[Symptom]:
        """Всі симптоми в порядку каталогу"""
        return list(self._symptoms)

    def filter(
        self,
        predicate: Callable[[str], bool],
        translate: Translate = _identity
    ) -> List[Symptom]:
        """
        Відфільтрувати симптоми за відображуваним текстом.

        Args:
            predicate: Умова на текст назви
            translate: Перетворення name_key → текст

        Returns:
            Підпослідовність каталогу (порядок збережено)
        """
        return [s for s in self._symptoms if predicate(translate(s.name_key))]

    def search(self, query: str, translate: Translate = _identity) -> List[Symptom]:
        """Пошук без урахування регістру; порожній запит → весь каталог"""
        needle = (query or "").strip().lower()
        if not needle:
            return self.list()
        return self.filter(lambda text: needle in text.lower(), translate)

    def get(self, symptom_id: str) -> Symptom:
        """
        Отримати симптом за id.

        Raises:
            UnknownSymptomError: Якщо id відсутній у каталозі
        """
        try:
            return self._by_id[symptom_id]
        except KeyError:
            raise UnknownSymptomError(symptom_id) from None

    def by_ids(self, symptom_ids: Iterable[str]) -> List[Symptom]:
        """Симптоми за списком id (порядок аргументу збережено)"""
        return [self.get(sid) for sid in symptom_ids]

    def find_by_key(self, name_key: str) -> Optional[Symptom]:
        for symptom in self._symptoms:
            if symptom.name_key == name_key:
                return symptom
        return None

    def position(self, symptom_id: str) -> int:
        """Позиція симптому в каталозі"""
        self.get(symptom_id)
        return self._order[symptom_id]

    @property
    def categories(self) -> List[str]:
        """Категорії в порядку першої появи"""
        seen: List[str] = []
        for symptom in self._symptoms:
            if symptom.category not in seen:
                seen.append(symptom.category)
        return seen

    def __contains__(self, symptom_id: object) -> bool:
        return symptom_id in self._by_id

    def __iter__(self) -> Iterator[Symptom]:
        return iter(self._symptoms)

    def __len__(self) -> int:
        return len(self._symptoms)

    def __repr__(self) -> str:
        return f"SymptomCatalog(size={len(self)})"


# Каталог за замовчуванням
default_catalog = SymptomCatalog()
