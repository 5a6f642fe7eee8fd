import pytest

from paplu.logic.exceptions import ConfigError
from paplu.logic.rules import DEFAULT_RULES
from paplu.settings import RuleSettings, load_rules


@pytest.fixture(autouse=True)
def _clear_rule_env(monkeypatch):
    for name in RuleSettings.model_fields:
        monkeypatch.delenv(f"PAPLU_RULE_{name.upper()}", raising=False)


class TestRuleSettings:
    def test_defaults_match_default_rules(self):
        assert RuleSettings().model_dump() == DEFAULT_RULES.model_dump()

    def test_reads_prefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("PAPLU_RULE_SCOOT", "15")
        monkeypatch.setenv("PAPLU_RULE_PER_POINT", "2")

        settings = RuleSettings()

        assert settings.scoot == 15
        assert settings.per_point == 2


class TestLoadRules:
    def test_default_rules_without_env(self):
        assert load_rules() == DEFAULT_RULES

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PAPLU_RULE_TRIPLE_PAPLU", "75")

        assert load_rules().triple_paplu == 75

    def test_explicit_overrides_win_over_env(self, monkeypatch):
        monkeypatch.setenv("PAPLU_RULE_FULL", "60")

        assert load_rules(full=80).full == 80

    def test_negative_env_value_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("PAPLU_RULE_MID_SCOOT", "-20")

        with pytest.raises(ConfigError, match="mid_scoot"):
            load_rules()

    def test_non_numeric_env_value_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("PAPLU_RULE_SCOOT", "ten")

        with pytest.raises(ConfigError, match="scoot"):
            load_rules()
