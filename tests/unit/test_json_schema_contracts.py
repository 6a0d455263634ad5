"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (pattern/minimum/maximum)
- Интеграция с Pydantic моделями
- coins_from_payload: контракт + инварианты Coins
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    CoinsValidator,
    CoinValidator,
    SchemaLoader,
    coins_from_payload,
    validate_coin,
    validate_coins,
)
from src.core.domain import INT64_MAX, INT64_MIN, Coin, Coins, InvalidCoinSet, parse_coins


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_coin():
    """Валидный coin для тестирования."""
    return {"denom": "atom", "amount": 10}


@pytest.fixture
def valid_coins():
    """Валидный coins для тестирования."""
    return [
        {"denom": "atom", "amount": 5},
        {"denom": "btc", "amount": -10},
    ]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    @pytest.mark.parametrize("schema_name", ["coin", "coins"])
    def test_schemas_load(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("coin") is loader.load_schema("coin")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError, match="broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# COIN CONTRACT
# =============================================================================


class TestCoinContract:
    """Тесты контракта coin."""

    def test_valid(self, valid_coin):
        validate_coin(valid_coin)
        assert CoinValidator().is_valid(valid_coin)

    def test_int64_bounds(self):
        validate_coin({"denom": "atom", "amount": INT64_MAX})
        validate_coin({"denom": "atom", "amount": INT64_MIN})

    @pytest.mark.parametrize("missing", ["denom", "amount"])
    def test_required_fields(self, valid_coin, missing):
        del valid_coin[missing]
        with pytest.raises(ValidationError):
            validate_coin(valid_coin)

    @pytest.mark.parametrize(
        "payload",
        [
            {"denom": "atom", "amount": "10"},
            {"denom": "atom", "amount": 1.5},
            {"denom": "atom", "amount": INT64_MAX + 1},
            {"denom": "atom", "amount": INT64_MIN - 1},
            {"denom": "", "amount": 1},
            {"denom": "at0m", "amount": 1},
            {"denom": "at om", "amount": 1},
            {"denom": 7, "amount": 1},
            {"denom": "atom", "amount": 1, "extra": True},
        ],
    )
    def test_invalid(self, payload):
        with pytest.raises(ValidationError):
            validate_coin(payload)

    def test_iter_errors_reports_all(self):
        errors = list(CoinValidator().iter_errors({"amount": "x"}))
        assert len(errors) == 2

    def test_pydantic_dump_matches_contract(self):
        coin = Coin(denom="atom", amount=-3)
        validate_coin(coin.model_dump(mode="json"))


# =============================================================================
# COINS CONTRACT
# =============================================================================


class TestCoinsContract:
    """Тесты контракта coins."""

    def test_valid(self, valid_coins):
        validate_coins(valid_coins)
        assert CoinsValidator().is_valid(valid_coins)

    def test_empty_list(self):
        validate_coins([])

    @pytest.mark.parametrize(
        "payload",
        [
            {"denom": "atom", "amount": 1},
            "5atom,10btc",
            [{"denom": "atom"}],
            [{"denom": "atom", "amount": 1}, "10btc"],
        ],
    )
    def test_invalid(self, payload):
        with pytest.raises(ValidationError):
            validate_coins(payload)

    def test_contract_does_not_check_order(self):
        """Порядок и нули не входят в JSON контракт"""
        validate_coins([{"denom": "btc", "amount": 0}, {"denom": "atom", "amount": 1}])

    def test_pydantic_dump_matches_contract(self):
        coins = parse_coins("5atom,10btc")
        validate_coins(coins.model_dump(mode="json"))


# =============================================================================
# COINS_FROM_PAYLOAD
# =============================================================================


class TestCoinsFromPayload:
    """Тесты coins_from_payload."""

    def test_valid(self, valid_coins):
        result = coins_from_payload(valid_coins)
        assert result == Coins(
            (Coin(denom="atom", amount=5), Coin(denom="btc", amount=-10))
        )

    def test_sorts(self):
        result = coins_from_payload(
            [{"denom": "btc", "amount": 1}, {"denom": "atom", "amount": 2}]
        )
        assert str(result) == "2atom,1btc"

    def test_empty(self):
        assert coins_from_payload([]) == Coins()

    def test_shape_violation(self):
        with pytest.raises(ValidationError):
            coins_from_payload([{"denom": "atom", "amount": "1"}])

    def test_duplicate_denoms(self):
        with pytest.raises(InvalidCoinSet):
            coins_from_payload(
                [{"denom": "atom", "amount": 1}, {"denom": "atom", "amount": 2}]
            )

    def test_zero_amount(self):
        with pytest.raises(InvalidCoinSet):
            coins_from_payload([{"denom": "atom", "amount": 0}])
