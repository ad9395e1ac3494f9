"""Tests for checking_context and CheckConfig."""

import pytest
from pydantic import ValidationError

from lawful import CheckConfig, Obey, checking_context, current_config


class TestCheckConfig:
    def test_defaults(self):
        config = CheckConfig()
        assert config.trials == 100
        assert config.first_hint == 0
        assert config.generator == "generate_data"
        assert config.max_repr_length == 80

    def test_rejects_bad_values(self):
        with pytest.raises(ValidationError):
            CheckConfig(trials=0)
        with pytest.raises(ValidationError):
            CheckConfig(unknown=True)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            CheckConfig().trials = 5


class TestCheckingContext:
    def test_default_outside_context(self):
        assert current_config() == CheckConfig()

    def test_override_and_restore(self):
        with checking_context(trials=7) as config:
            assert config.trials == 7
            assert current_config().trials == 7
        assert current_config().trials == 100

    def test_nested_layers(self):
        with checking_context(trials=7):
            with checking_context(first_hint=3):
                assert current_config().trials == 7
                assert current_config().first_hint == 3
            assert current_config().first_hint == 0

    def test_restored_after_error(self):
        with pytest.raises(RuntimeError):
            with checking_context(trials=7):
                raise RuntimeError("boom")
        assert current_config().trials == 100

    def test_invalid_override(self):
        with pytest.raises(ValidationError):
            with checking_context(trials=-1):
                pass

    def test_trials_drive_law_checks(self, recorder):
        candidate = recorder(range(20))
        with checking_context(trials=20):
            Obey(lambda x: True).check(candidate)
        assert len(candidate.hints) == 20

    def test_custom_generator_name(self):
        class Sampled:
            @classmethod
            def sample(cls, hint):
                return hint

        with checking_context(generator="sample", trials=5):
            assert Obey(lambda x: x >= 0).check(Sampled).is_success()
