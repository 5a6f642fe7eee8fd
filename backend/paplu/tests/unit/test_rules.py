import pytest
from pydantic import ValidationError

from paplu.logic.exceptions import ConfigError, PapluError
from paplu.logic.rules import DEFAULT_RULES, RuleTable, validate_rules

_DEFAULT_VALUES = {
    "three_card_bonus": 10,
    "scoot": 10,
    "mid_scoot": 20,
    "full": 40,
    "per_point": 1,
    "single_paplu": 10,
    "double_paplu": 30,
    "triple_paplu": 50,
}


class TestDefaultRules:
    def test_default_values(self):
        assert DEFAULT_RULES.model_dump() == _DEFAULT_VALUES

    def test_rule_table_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_RULES.scoot = 99

    def test_all_fields_are_required(self):
        with pytest.raises(ValidationError):
            RuleTable()

    def test_dumps_camel_case_by_alias(self):
        dumped = DEFAULT_RULES.model_dump(by_alias=True)

        assert dumped["threeCardBonus"] == 10
        assert dumped["midScoot"] == 20
        assert dumped["triplePaplu"] == 50


class TestValidateRules:
    def test_accepts_rule_table(self):
        assert validate_rules(DEFAULT_RULES) == DEFAULT_RULES

    def test_accepts_snake_case_mapping(self):
        rules = validate_rules({**_DEFAULT_VALUES, "scoot": 15})

        assert rules.scoot == 15

    def test_accepts_camel_case_mapping(self):
        rules = validate_rules(DEFAULT_RULES.model_dump(by_alias=True) | {"perPoint": 2})

        assert rules.per_point == 2
        assert rules.mid_scoot == 20

    @pytest.mark.parametrize("legacy_key", ["threeCardHand", "attaKasu"])
    def test_accepts_legacy_three_card_keys(self, legacy_key):
        data = {k: v for k, v in _DEFAULT_VALUES.items() if k != "three_card_bonus"}
        data[legacy_key] = 25

        assert validate_rules(data).three_card_bonus == 25

    def test_ignores_unknown_keys(self):
        assert validate_rules({**_DEFAULT_VALUES, "theme": "dark"}) == DEFAULT_RULES

    def test_zero_values_are_valid(self):
        rules = validate_rules(dict.fromkeys(_DEFAULT_VALUES, 0))

        assert rules.full == 0

    def test_missing_value_raises_config_error(self):
        data = {k: v for k, v in _DEFAULT_VALUES.items() if k != "double_paplu"}

        with pytest.raises(ConfigError, match="double_paplu"):
            validate_rules(data)

    def test_negative_value_raises_config_error(self):
        with pytest.raises(ConfigError, match="full"):
            validate_rules({**_DEFAULT_VALUES, "full": -40})

    @pytest.mark.parametrize("value", ["lots", True, "15", 10.0])
    def test_non_integer_value_raises_config_error(self, value):
        with pytest.raises(ConfigError, match="per_point"):
            validate_rules({**_DEFAULT_VALUES, "per_point": value})

    def test_reports_every_problem(self):
        data = {**_DEFAULT_VALUES, "scoot": -1, "triple_paplu": -5}
        del data["single_paplu"]

        with pytest.raises(ConfigError) as exc_info:
            validate_rules(data)

        message = str(exc_info.value)
        assert "scoot" in message
        assert "triple_paplu" in message
        assert "single_paplu" in message

    def test_chains_validation_error(self):
        with pytest.raises(ConfigError) as exc_info:
            validate_rules({})

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_non_mapping_raises_config_error(self):
        with pytest.raises(ConfigError, match="expected a mapping"):
            validate_rules([10, 10, 20])  # type: ignore[arg-type]

    def test_config_error_is_paplu_error(self):
        with pytest.raises(PapluError):
            validate_rules({"scoot": -1})
