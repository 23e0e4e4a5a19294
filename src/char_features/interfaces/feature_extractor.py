"""
Абстрактные интерфейсы для модулей извлечения признаков.

Каждый модуль признаков описывает свои выходы набором «слотов»
(имя, тип, экстрактор). Из одного и того же набора слотов строятся и
карта признаков (compute), и метаданные (describe), поэтому схема
не может разойтись с фактическими ключами.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, NamedTuple, Optional, Tuple, TypeVar, Union


FeatureValue = Union[int, float, bool, str]

ResultT = TypeVar("ResultT")


class FeatureType(str, Enum):
    """Тип значения признака."""
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    CATEGORICAL = "categorical"


@dataclass(frozen=True)
class FeatureMeta:
    """Описание признака: имя, тип и (для категориальных) домен значений."""
    name: str
    type: FeatureType
    domain: Optional[Tuple[str, ...]] = None

    @classmethod
    def numeric(cls, name: str) -> "FeatureMeta":
        return cls(name, FeatureType.NUMERIC)

    @classmethod
    def boolean(cls, name: str) -> "FeatureMeta":
        return cls(name, FeatureType.BOOLEAN)

    @classmethod
    def categorical(cls, name: str, domain: Tuple[str, ...]) -> "FeatureMeta":
        return cls(name, FeatureType.CATEGORICAL, tuple(domain))


@dataclass(frozen=True)
class FeatureSlot(Generic[ResultT]):
    """Слот признака: метаданные и функция чтения значения из результата."""
    meta: FeatureMeta
    extract: Callable[[ResultT], FeatureValue]

    @property
    def name(self) -> str:
        return self.meta.name


class Token(NamedTuple):
    """Токен, полученный от внешнего токенизатора."""
    text: str
    start_char: int = 0
    end_char: int = 0


class FeatureExtractorInterface(ABC, Generic[ResultT]):
    """Интерфейс модуля признаков.

    Подклассы реализуют ``analyze`` (типизированный результат) и
    ``_build_slots`` (список слотов для параметров модуля). Параметры
    фиксируются в конструкторе: ``compute`` и ``describe`` одного экземпляра
    всегда согласованы.
    """

    #: Короткое имя модуля (используется в конфигурации и CLI)
    name: str = ""
    #: Что принимает модуль: 'text' или 'tokens'
    input_kind: str = "text"

    def __init__(self):
        self._slots: Tuple[FeatureSlot, ...] = tuple(self._build_slots())

    @abstractmethod
    def analyze(self, data: Any) -> ResultT:
        """Вычисляет типизированный результат по входным данным."""
        pass

    @abstractmethod
    def _build_slots(self) -> List[FeatureSlot]:
        """Возвращает упорядоченный список слотов признаков."""
        pass

    @property
    def slots(self) -> Tuple[FeatureSlot, ...]:
        return self._slots

    def describe(self) -> List[FeatureMeta]:
        """Метаданные признаков (не требуют входного текста)."""
        return [slot.meta for slot in self._slots]

    def feature_names(self) -> List[str]:
        return [slot.name for slot in self._slots]

    def compute(self, data: Any) -> Dict[str, FeatureValue]:
        """Карта признаков: имя -> значение."""
        return self.features_from_result(self.analyze(data))

    def features_from_result(self, result: ResultT) -> Dict[str, FeatureValue]:
        """Разворачивает типизированный результат в карту признаков."""
        return {slot.name: slot.extract(result) for slot in self._slots}
