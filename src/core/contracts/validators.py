"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления монет согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия данных
схемам.

Схемы (src/core/contracts/schema/):
- coin.json  — {"denom": str, "amount": int64}
- coins.json — массив coin

Схемы проверяют только форму и типы. Инварианты набора (порядок denom,
отсутствие нулевых amount) проверяет Coins.from_coins.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.coin import Coin
from src.core.domain.coins import Coins


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'coins')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class CoinValidator(ContractValidator):
    """Валидатор для контракта coin."""

    def __init__(self):
        super().__init__("coin")


class CoinsValidator(ContractValidator):
    """Валидатор для контракта coins."""

    def __init__(self):
        super().__init__("coins")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_coin(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления одной монеты.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CoinValidator().validate(data)


def validate_coins(data: List[Dict[str, Any]]) -> None:
    """
    Валидация JSON-представления набора монет.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CoinsValidator().validate(data)


def coins_from_payload(data: List[Dict[str, Any]]) -> Coins:
    """
    Внешний JSON → канонический Coins.

    Сначала проверяется форма по контракту coins, затем набор сортируется
    и проверяется как при parse_coins.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        InvalidCoinSet: Если набор нарушает инварианты Coins
    """
    validate_coins(data)
    return Coins.from_coins(Coin.model_validate(item) for item in data)
