"""Tests for secrets/resolver.py module."""

from unittest.mock import MagicMock

import pytest
from conftest import b64

from kubectl_view_secret.exceptions import (
    DecodeError,
    KeyNotFoundError,
    NoSecretFoundError,
    PromptError,
    SecretEmptyError,
)
from kubectl_view_secret.models import KeyValue, Secret, SecretList
from kubectl_view_secret.secrets.prompts import ScriptedPrompter
from kubectl_view_secret.secrets.resolver import ALL_KEYS, KEY_PROMPT_TITLE, pick_secret, resolve


class TestResolveEmpty:
    """Tests for secrets without data."""

    @pytest.mark.parametrize("decode_all_keys", [True, False])
    @pytest.mark.parametrize("key", ["", "missing"])
    def test_empty_secret_always_fails(self, key, decode_all_keys):
        """Test an empty secret fails before anything else, whatever was requested."""
        prompter = MagicMock()
        secret = Secret(name="test-empty", namespace="default", type="Opaque", data={})

        with pytest.raises(SecretEmptyError, match="test-empty"):
            resolve(secret, prompter, key=key, decode_all_keys=decode_all_keys)

        prompter.select.assert_not_called()


class TestResolveAll:
    """Tests for decoding all keys."""

    def test_decode_all_flag(self, multi_key_secret):
        """Test --all decodes every key in ascending order."""
        selection = resolve(multi_key_secret, ScriptedPrompter([]), decode_all_keys=True)

        assert selection.multi is True
        assert selection.auto_selected is None
        assert selection.key_values == (
            KeyValue("TEST_PASSWORD", "secret\n"),
            KeyValue("TEST_PASSWORD_2", "verysecret\n"),
        )

    def test_decode_all_beats_explicit_key(self, multi_key_secret):
        """Test --all wins over an explicit key, even a missing one."""
        selection = resolve(multi_key_secret, ScriptedPrompter([]), key="NONE", decode_all_keys=True)

        assert selection.multi is True
        assert len(selection.key_values) == 2

    def test_decode_failure_aborts(self):
        """Test a bad value aborts the batch and names the key."""
        secret = Secret(name="bad", namespace="default", data={"good": b64("ok"), "bad": "!!"})

        with pytest.raises(DecodeError, match="'bad'"):
            resolve(secret, ScriptedPrompter([]), decode_all_keys=True)


class TestResolveSingleKey:
    """Tests for secrets with exactly one key."""

    def test_single_key_auto_selected(self, single_key_secret):
        """Test the only key is decoded without prompting."""
        prompter = ScriptedPrompter([])

        selection = resolve(single_key_secret, prompter)

        assert selection.multi is False
        assert selection.auto_selected == "SINGLE_PASSWORD"
        assert selection.key_values == (KeyValue("SINGLE_PASSWORD", "secret\n"),)
        assert prompter.calls == []

    def test_single_key_ignores_explicit_key(self, single_key_secret):
        """Test a single key secret short-circuits even with a missing key requested."""
        selection = resolve(single_key_secret, ScriptedPrompter([]), key="OTHER")

        assert selection.auto_selected == "SINGLE_PASSWORD"
        assert selection.key_values[0].value == "secret\n"

    def test_decode_all_on_single_key(self, single_key_secret):
        """Test --all on a single key secret still decodes all keys."""
        selection = resolve(single_key_secret, ScriptedPrompter([]), decode_all_keys=True)

        assert selection.multi is True
        assert selection.auto_selected is None


class TestResolveExplicitKey:
    """Tests for an explicitly requested key."""

    def test_explicit_key(self, multi_key_secret):
        """Test the requested key is decoded."""
        selection = resolve(multi_key_secret, ScriptedPrompter([]), key="TEST_PASSWORD")

        assert selection.multi is False
        assert selection.auto_selected is None
        assert selection.key_values == (KeyValue("TEST_PASSWORD", "secret\n"),)

    def test_missing_key(self):
        """Test a missing key fails without prompting."""
        prompter = MagicMock()
        secret = Secret(name="three", namespace="default", data={"a": b64("1"), "b": b64("2"), "c": b64("3")})

        with pytest.raises(KeyNotFoundError) as exc_info:
            resolve(secret, prompter, key="NONE")

        assert exc_info.value.key == "NONE"
        assert "not found" in str(exc_info.value)
        prompter.select.assert_not_called()


class TestResolveInteractive:
    """Tests for operator disambiguation."""

    def test_prompt_options(self, multi_key_secret):
        """Test the prompt offers 'all' followed by sorted keys."""
        prompter = ScriptedPrompter(["TEST_PASSWORD_2"])

        resolve(multi_key_secret, prompter)

        title, description, options = prompter.calls[0]
        assert title == KEY_PROMPT_TITLE
        assert "test" in description
        assert options == [ALL_KEYS, "TEST_PASSWORD", "TEST_PASSWORD_2"]

    def test_select_all(self, multi_key_secret):
        """Test choosing 'all' decodes every key, sorted."""
        selection = resolve(multi_key_secret, ScriptedPrompter([ALL_KEYS]))

        assert selection.multi is True
        assert [kv.key for kv in selection.key_values] == ["TEST_PASSWORD", "TEST_PASSWORD_2"]

    def test_select_key(self, multi_key_secret):
        """Test choosing a key decodes only that key."""
        selection = resolve(multi_key_secret, ScriptedPrompter(["TEST_PASSWORD_2"]))

        assert selection.multi is False
        assert selection.auto_selected is None
        assert selection.key_values == (KeyValue("TEST_PASSWORD_2", "verysecret\n"),)

    def test_prompt_called_once(self, multi_key_secret):
        """Test the operator is asked only once."""
        prompter = MagicMock()
        prompter.select.return_value = "TEST_PASSWORD"

        resolve(multi_key_secret, prompter)

        prompter.select.assert_called_once()

    def test_prompt_failure_propagates(self, multi_key_secret):
        """Test a cancelled prompt surfaces as an error."""
        prompter = MagicMock()
        prompter.select.side_effect = PromptError("Selection cancelled")

        with pytest.raises(PromptError, match="cancelled"):
            resolve(multi_key_secret, prompter)


class TestPickSecret:
    """Tests for picking a secret from a listing."""

    def _secrets(self, *names: str, namespace: str = "default") -> SecretList:
        return SecretList(items=tuple(Secret(name=name, namespace=namespace) for name in names))

    def test_empty_listing(self):
        """Test an empty listing fails."""
        with pytest.raises(NoSecretFoundError, match="namespace 'dev'"):
            pick_secret(SecretList(), MagicMock(), scope="namespace 'dev'")

    def test_single_secret_not_prompted(self):
        """Test a single secret is picked without prompting."""
        prompter = MagicMock()

        secret = pick_secret(self._secrets("only"), prompter, scope="the current namespace")

        assert secret.name == "only"
        prompter.select.assert_not_called()

    def test_prompt_sorted_names(self):
        """Test secrets are offered sorted by name and the choice is returned."""
        prompter = ScriptedPrompter(["beta"])

        secret = pick_secret(self._secrets("gamma", "alpha", "beta"), prompter, scope="the current namespace")

        assert secret.name == "beta"
        assert prompter.calls[0][2] == ["alpha", "beta", "gamma"]

    def test_qualified_labels(self):
        """Test cross-namespace listings are labelled namespace/name."""
        listing = SecretList(
            items=(
                Secret(name="db", namespace="prod"),
                Secret(name="db", namespace="dev"),
            )
        )
        prompter = ScriptedPrompter(["prod/db"])

        secret = pick_secret(listing, prompter, scope="all namespaces", qualified=True)

        assert secret.namespace == "prod"
        assert prompter.calls[0][2] == ["dev/db", "prod/db"]
